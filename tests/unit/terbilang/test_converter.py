"""Test Indonesian number-to-words conversion."""
from decimal import Decimal

import pytest
from indonesia_utils.terbilang.converter import terbilang, terbilang_rupiah


class TestTerbilangBasic:
    def test_zero(self):
        assert terbilang(0) == "nol"

    @pytest.mark.parametrize("number,words", [
        (1, "satu"), (2, "dua"), (3, "tiga"), (4, "empat"), (5, "lima"),
        (6, "enam"), (7, "tujuh"), (8, "delapan"), (9, "sembilan"),
    ])
    def test_single_digits(self, number, words):
        assert terbilang(number) == words

    def test_teens(self):
        assert terbilang(10) == "sepuluh"
        assert terbilang(11) == "sebelas"
        assert terbilang(12) == "dua belas"
        assert terbilang(19) == "sembilan belas"

    def test_tens(self):
        assert terbilang(20) == "dua puluh"
        assert terbilang(25) == "dua puluh lima"
        assert terbilang(67) == "enam puluh tujuh"
        assert terbilang(99) == "sembilan puluh sembilan"


class TestTerbilangHundredsAndThousands:
    def test_irregular_singular_forms(self):
        assert terbilang(100) == "seratus"
        assert terbilang(1000) == "seribu"
        assert terbilang(200) == "dua ratus"
        assert terbilang(2000) == "dua ribu"

    def test_hundreds_with_remainder(self):
        assert terbilang(101) == "seratus satu"
        assert terbilang(125) == "seratus dua puluh lima"
        assert terbilang(375) == "tiga ratus tujuh puluh lima"
        assert terbilang(999) == "sembilan ratus sembilan puluh sembilan"

    def test_thousands(self):
        assert terbilang(10000) == "sepuluh ribu"
        assert terbilang(25000) == "dua puluh lima ribu"
        assert terbilang(100000) == "seratus ribu"
        assert terbilang(500000) == "lima ratus ribu"

    def test_thousands_with_remainder(self):
        assert terbilang(1001) == "seribu satu"
        assert terbilang(1500) == "seribu lima ratus"
        assert terbilang(12345) == "dua belas ribu tiga ratus empat puluh lima"
        assert terbilang(999999) == (
            "sembilan ratus sembilan puluh sembilan ribu sembilan ratus sembilan puluh sembilan"
        )


class TestTerbilangLargeBands:
    def test_millions_have_no_irregular_form(self):
        assert terbilang(1000000) == "satu juta"
        assert terbilang(100000000) == "seratus juta"

    def test_millions_with_remainder(self):
        assert terbilang(1000001) == "satu juta satu"
        assert terbilang(1500000) == "satu juta lima ratus ribu"
        assert terbilang(1234567) == (
            "satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh"
        )

    def test_billions(self):
        assert terbilang(1000000000) == "satu miliar"
        assert terbilang(1000000001) == "satu miliar satu"
        assert terbilang(2500500000) == "dua miliar lima ratus juta lima ratus ribu"

    def test_trillions(self):
        assert terbilang(1000000000000) == "satu triliun"
        assert terbilang(1500000000000) == "satu triliun lima ratus miliar"
        assert terbilang(2123456789012) == (
            "dua triliun seratus dua puluh tiga miliar empat ratus lima puluh enam juta "
            "tujuh ratus delapan puluh sembilan ribu dua belas"
        )

    def test_maximum(self):
        assert terbilang(999_999_999_999_999).startswith("sembilan ratus sembilan puluh sembilan triliun")

    def test_beyond_maximum_logs_warning(self, captured_logs):
        assert terbilang(10**15) == "seribu triliun"
        assert captured_logs[-1]["event"] == "terbilang_out_of_range"
        assert captured_logs[-1]["log_level"] == "warning"


class TestTerbilangDecimals:
    def test_koma(self):
        assert terbilang(1.5) == "satu koma lima puluh"
        assert terbilang(10.25) == "sepuluh koma dua puluh lima"
        assert terbilang(1000.99) == "seribu koma sembilan puluh sembilan"

    def test_single_digit_fraction(self):
        assert terbilang(1.1) == "satu koma sepuluh"
        assert terbilang(5.05) == "lima koma lima"
        assert terbilang(100.01) == "seratus koma satu"

    def test_rounds_to_two_places(self):
        assert terbilang(1.234) == "satu koma dua puluh tiga"
        assert terbilang(1.999) == "satu koma seratus"

    def test_fraction_below_one(self):
        assert terbilang(0.5) == "nol koma lima puluh"

    def test_whole_float_has_no_koma(self):
        assert terbilang(100.0) == "seratus"

    def test_decimal_input(self):
        assert terbilang(Decimal("1234567.89")) == (
            "satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh koma delapan puluh sembilan"
        )


class TestTerbilangNegative:
    def test_minus(self):
        assert terbilang(-1) == "minus satu"
        assert terbilang(-1000) == "minus seribu"
        assert terbilang(-1234567) == (
            "minus satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh"
        )

    def test_negative_decimals(self):
        assert terbilang(-1.5) == "minus satu koma lima puluh"
        assert terbilang(-100.25) == "minus seratus koma dua puluh lima"


class TestTerbilangRupiah:
    def test_suffix(self):
        assert terbilang_rupiah(1000) == "seribu rupiah"
        assert terbilang_rupiah(2500000) == "dua juta lima ratus ribu rupiah"

    def test_zero(self):
        assert terbilang_rupiah(0) == "nol rupiah"

    def test_decimal(self):
        assert terbilang_rupiah(1000.50) == "seribu koma lima puluh rupiah"
        assert terbilang_rupiah(2500.99) == "dua ribu lima ratus koma sembilan puluh sembilan rupiah"

    def test_negative(self):
        assert terbilang_rupiah(-1000) == "minus seribu rupiah"

    def test_real_world_invoice_amount(self):
        assert terbilang_rupiah(123456789) == (
            "seratus dua puluh tiga juta empat ratus lima puluh enam ribu "
            "tujuh ratus delapan puluh sembilan rupiah"
        )
