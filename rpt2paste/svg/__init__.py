from .generator import SVGGenerator

# PNG rendering needs the cairo system library; import it from
# rpt2paste.svg.render when needed.
__all__ = ["SVGGenerator"]
