import random

import pytest

from mixradix import composite
from mixradix.radix2 import dft
from mixradix.radix5 import (
    cooley_tukey,
    fft,
    five_point_twiddle,
    in_place_fft,
    main,
    radix5_kernel,
    split_mod5,
    twiddle_multiply,
)


def _samples(length, seed=7):
    rng = random.Random(seed)
    return [float(rng.randrange(10)) for _ in range(length)]


def _assert_close(got, want):
    assert len(got) == len(want)
    for a, b in zip(got, want):
        assert a == pytest.approx(b, abs=1e-7)


def test_split_mod5_picks_residue_class():
    samples = list(range(10))
    assert split_mod5(samples, 2) == [2, 7]
    assert split_mod5(samples, 0) == [0, 5]


def test_split_mod5_parts_cover_input():
    samples = list(range(25))
    parts = [split_mod5(samples, r) for r in range(5)]
    assert sorted(v for part in parts for v in part) == samples


def test_split_mod5_rejects_bad_remainder():
    with pytest.raises(ValueError):
        split_mod5([1, 2, 3, 4, 5], 5)


def test_radix5_kernel_matches_dft():
    values = [1 + 2j, -3.0, 0.5j, 4.0, 2 - 1j]
    _assert_close(radix5_kernel(values), dft(values))


def test_radix5_kernel_rejects_wrong_length():
    with pytest.raises(ValueError):
        radix5_kernel([1.0, 2.0])


def test_five_point_twiddle_index_zero_is_sum():
    inputs = [1.0, 2j, 3.0, -1.0, 0.5]
    assert five_point_twiddle(inputs, 0, 25) == pytest.approx(sum(inputs))


def test_five_point_twiddle_full_length_matches_kernel():
    inputs = [2.0, 1j, -1.0, 3.0, 1 + 1j]
    kernel = radix5_kernel(inputs)
    combined = [five_point_twiddle(inputs, i, 5) for i in range(5)]
    _assert_close(combined, kernel)


def test_five_point_twiddle_rejects_bad_input():
    with pytest.raises(ValueError):
        five_point_twiddle([1.0, 2.0], 0, 5)
    with pytest.raises(ValueError):
        five_point_twiddle([1.0] * 5, 0, 0)


def test_twiddle_multiply_contiguous_is_dft():
    values = [3.0, 1.0, 4.0, 1.0, 5.0]
    _assert_close(twiddle_multiply(values, 1, 5, 5), dft(values))


def test_twiddle_multiply_strided_leaves_other_positions():
    values = [float(v) for v in range(10)]
    result = twiddle_multiply(values, 2, 5, 5)
    assert result[1::2] == [complex(v) for v in values[1::2]]
    _assert_close(result[::2], dft(values[::2]))
    assert values == [float(v) for v in range(10)]


def test_twiddle_multiply_rejects_short_buffer():
    with pytest.raises(ValueError):
        twiddle_multiply([1.0] * 8, 2, 5, 5)


@pytest.mark.parametrize("length", [5, 25, 125])
def test_fft_matches_dft(length):
    samples = _samples(length)
    _assert_close(fft(samples), dft(samples))


@pytest.mark.parametrize("length", [5, 25, 125])
def test_cooley_tukey_matches_dft(length):
    samples = _samples(length, seed=3)
    _assert_close(cooley_tukey(samples), dft(samples))


@pytest.mark.parametrize("length", [5, 25, 125, 625])
def test_in_place_fft_matches_other_methods(length):
    samples = _samples(length, seed=11)
    result = in_place_fft(samples)
    _assert_close(result, cooley_tukey(samples))
    if length <= 125:
        _assert_close(result, composite.fft(samples))


def test_dc_bin_is_sum():
    samples = _samples(25)
    assert fft(samples)[0] == pytest.approx(sum(samples))
    assert in_place_fft(samples)[0] == pytest.approx(sum(samples))


@pytest.mark.parametrize("transform", [fft, cooley_tukey, in_place_fft])
@pytest.mark.parametrize("length", [0, 1, 10, 20, 50])
def test_rejects_non_power_of_five(transform, length):
    with pytest.raises(ValueError):
        transform([1.0] * length)


def _run(tmp_path, capsys, *extra):
    source = tmp_path / "input.txt"
    source.write_text("25\n")
    assert main([str(source), "--seed", "4", *extra]) == 0
    return capsys.readouterr().out.splitlines()


def test_main_prints_spectrum(tmp_path, capsys):
    lines = _run(tmp_path, capsys)
    assert lines[0] == "length: 25"
    assert len(lines) == 27
    samples = [float(v) for v in lines[1].strip("[] ").rstrip(",").split(", ")]
    assert len(samples) == 25
    real, imag = lines[2].split(",\t")
    assert real == f"{sum(samples):f}"
    assert imag.endswith("j")


def test_main_methods_agree(tmp_path, capsys):
    default = _run(tmp_path, capsys)
    for method in ("cooley-tukey", "in-place"):
        other = _run(tmp_path, capsys, "--method", method)
        assert other[:2] == default[:2]
        for a, b in zip(other[2:], default[2:]):
            re_a, im_a = a.rstrip("j").split(",\t")
            re_b, im_b = b.rstrip("j").split(",\t")
            assert float(re_a) == pytest.approx(float(re_b), abs=1e-5)
            assert float(im_a) == pytest.approx(float(im_b), abs=1e-5)


def test_main_rejects_bad_length(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("12\n")
    assert main([str(source)]) == 1
    assert "power of five" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1