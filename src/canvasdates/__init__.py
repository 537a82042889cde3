"""canvasdates: rewrite DateReplace placeholders in IMS Common Cartridge exports."""

__version__ = "0.1.0"
