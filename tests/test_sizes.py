"""Tests for byte-size formatting."""

import pytest

from humanfmt.core.sizes import (
    E_BYTE,
    EI_BYTE,
    G_BYTE,
    GI_BYTE,
    IEC_UNITS,
    K_BYTE,
    KI_BYTE,
    M_BYTE,
    MI_BYTE,
    P_BYTE,
    PI_BYTE,
    SI_UNITS,
    T_BYTE,
    TI_BYTE,
    format_bytes,
    format_ibytes,
    format_size,
)


class TestUnitConstants:
    def test_iec_powers(self):
        assert KI_BYTE == 1024
        assert MI_BYTE == 1024**2
        assert EI_BYTE == 2**60

    def test_si_powers(self):
        assert K_BYTE == 1000
        assert G_BYTE == 10**9
        assert E_BYTE == 10**18

    def test_unit_tables(self):
        assert SI_UNITS == ("B", "kB", "MB", "GB", "TB", "PB", "EB")
        assert IEC_UNITS == ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


class TestFormatBytes:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (K_BYTE, "1 kB"),
            (K_BYTE * 5, "5 kB"),
            (M_BYTE, "1 MB"),
            (M_BYTE * 5, "5 MB"),
            (G_BYTE, "1 GB"),
            (G_BYTE * 5, "5 GB"),
            (T_BYTE, "1 TB"),
            (T_BYTE * 5, "5 TB"),
            (P_BYTE, "1 PB"),
            (P_BYTE * 5, "5 PB"),
            (E_BYTE, "1 EB"),
            (E_BYTE * 5, "5 EB"),
        ],
    )
    def test_si_units(self, size, expected):
        assert format_bytes(size) == expected

    def test_tiny_values_are_not_scaled(self):
        assert format_bytes(9) == "9 B"

    def test_two_digit_values_get_one_decimal(self):
        assert format_bytes(10) == "10.0 B"
        assert format_bytes(999) == "999.0 B"

    def test_scaled_value_is_floored(self):
        assert format_bytes(1999) == "1 kB"
        assert format_bytes(15_500) == "15.0 kB"
        assert format_bytes(999_999) == "999.0 kB"

    def test_largest_unit_is_clamped(self):
        assert format_bytes(E_BYTE * 5000) == "5000.0 EB"

    def test_u64_max(self):
        assert format_bytes(2**64 - 1) == "18.0 EB"


class TestFormatIBytes:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (KI_BYTE, "1 KiB"),
            (KI_BYTE * 5, "5 KiB"),
            (MI_BYTE, "1 MiB"),
            (MI_BYTE * 5, "5 MiB"),
            (GI_BYTE, "1 GiB"),
            (GI_BYTE * 5, "5 GiB"),
            (TI_BYTE, "1 TiB"),
            (TI_BYTE * 5, "5 TiB"),
            (PI_BYTE, "1 PiB"),
            (PI_BYTE * 5, "5 PiB"),
            (EI_BYTE, "1 EiB"),
            (EI_BYTE * 5, "5 EiB"),
        ],
    )
    def test_iec_units(self, size, expected):
        assert format_ibytes(size) == expected

    def test_below_one_kibibyte(self):
        assert format_ibytes(1000) == "1000.0 B"
        assert format_ibytes(1023) == "1023.0 B"

    def test_u64_max(self):
        assert format_ibytes(2**64 - 1) == "15.0 EiB"


class TestFormatSize:
    def test_defaults_to_si(self):
        assert format_size(5000) == "5 kB"

    def test_binary_base(self):
        assert format_size(2048, base=1024) == "2 KiB"

    def test_unsupported_base(self):
        with pytest.raises(ValueError, match="base"):
            format_size(5000, base=10)

    def test_negative_magnitude(self):
        with pytest.raises(ValueError, match="non-negative"):
            format_bytes(-1)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            format_bytes(1.5)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            format_bytes(True)

    def test_repeatable(self):
        assert format_ibytes(123_456_789) == format_ibytes(123_456_789)
