"""Convert KiCad placement reports into solder paste dispensing plans."""

__version__ = "0.1.0"
