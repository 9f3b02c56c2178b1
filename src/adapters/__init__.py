"""Adaptadores de I/O: HTTP upstream, parser HTML, exportación.

Por qué un paquete:
- Implementan los contratos de `core.interfaces` con librerías concretas
  (httpx, BeautifulSoup) sin que el Core las conozca.
"""
