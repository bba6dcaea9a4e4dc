"""Mixed-radix Cooley-Tukey discrete Fourier transforms, radix-2 and radix-5 variants, and sine-wave tools."""

__version__ = "0.1.0"