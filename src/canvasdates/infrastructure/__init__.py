"""Infrastructure layer: file I/O and the external zip/unzip tools.

It must never import from services, commands, or output.
The service layer bridges between the domain and infrastructure.
"""
