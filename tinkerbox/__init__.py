"""Small teaching programs: data structures, sorting and lotto, greetings, BMI, tone synthesis and in-memory pixel drawing."""

__version__ = "0.1.0"