# mixradix

Discrete Fourier transforms of real-valued samples, computed with the
Cooley-Tukey method over mixed radices. Pure Python, no dependencies outside
the standard library.

## Modules

- `mixradix.composite` – the general transform. `fft(samples)` returns one
  complex value per sample. Each length is split by the first of the radices
  2, 3, 5 and 7 that divides it; a length none of them divides is handled by
  a direct DFT. The per-bin kernels `radix_2_fft`, `radix_3_fft`,
  `radix_5_fft`, `radix_7_fft` and `radix_n_fft` evaluate one bin `k` of a
  short DFT over `samples[offset::stride]`.
- `mixradix.radix2` – `split_even`, `split_odd`, a direct `dft`, the radix-2
  `butterfly`, a closed-form five-point transform of real samples
  (`radix5_fft`), a ten-point transform built from two of those
  (`point10_fft`), and recursive radix-2 `cooley_tukey` for power-of-two
  lengths.
- `mixradix.radix5` – transforms for lengths that are powers of five:
  `fft` (recursive, one bin at a time), `cooley_tukey` (split by index
  modulo 5, then combine) and `in_place_fft` (digit-reversed, iterative, one
  working buffer). Their building blocks are `split_mod5`, `radix5_kernel`,
  `five_point_twiddle` and `twiddle_multiply`. Other lengths raise
  `ValueError`.
- `mixradix.waves` – `generate_wave` (a sum of sines sampled at a given
  rate), `half_spectrum` (the first `len(samples) // 2` DFT bins),
  `five_point_dft` and `twiddle_table` (the `radix` x `radix` table of
  factors `exp(-2πi·row·col/radix)`).

## Installing

```
pip install .
```

## Using the library

```python
from mixradix.composite import fft

spectrum = fft([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
for bin_value in spectrum:
    print(bin_value)
```

The first bin is the sum of the samples; for real input the remaining bins
come in conjugate pairs.

## Commands

- `mixradix [INPUT] [--seed N]` – reads a length from the first token of
  `INPUT` (default `input.txt`), draws that many random samples in 0..9 and
  prints the samples and their spectrum from `composite.fft`.
- `mixradix-radix2 [INPUT] [-o OUTPUT]` – reads a count followed by that many
  samples (stdin by default); the count must be 10. Prints the ten-point
  transform.
- `mixradix-radix5 [INPUT] [--method {cooley-tukey,fft,in-place}] [--seed N]`
  – reads a length that must be a power of five (from `input.txt` by
  default), draws that many random samples in 0..9 and prints their spectrum.
- `mixradix-waves [INPUT] [-o OUTPUT] [--twiddle RADIX]` – reads a sampling
  frequency, a sample count, a number of tones, then their frequencies and
  amplitudes, and prints the magnitude and phase (in degrees) of each bin of
  the half spectrum. With `--twiddle RADIX` it prints the cosine and sine
  table of that radix instead.

Commands print `error: ...` (or a short message) to stderr and exit with
status 1 on unreadable or invalid input.

## What it does not do

There is no inverse transform, and no windowing or other signal conditioning.
The `mixradix` and `mixradix-radix5` commands take only a length from their
input file and transform random samples; to transform data of your own, call
the library functions.

## Running the tests

```
pip install .[test]
pytest
```