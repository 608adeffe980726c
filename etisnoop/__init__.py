"""Building blocks for analysing DAB ETI streams: CRCs, FIG headers, tables, watermarks and FIG rates."""

__version__ = "2.2.0"