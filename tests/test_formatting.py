import pytest

from brtaxid.errors import DigitParseError
from brtaxid.formatting import (
    cnpj_check_digits,
    cpf_check_digits,
    format_cnpj,
    format_cpf,
    format_document,
)
from brtaxid.validators import is_cnpj_valid, is_cpf_valid


def test_check_digits_match_known_documents() -> None:
    assert cpf_check_digits("529982247") == "25"
    assert cnpj_check_digits("114447770001") == "61"
    assert cnpj_check_digits("042520110001") == "10"


def test_generated_digits_validate() -> None:
    base = "123456789"
    assert is_cpf_valid(base + cpf_check_digits(base))
    base = "123456780001"
    assert is_cnpj_valid(base + cnpj_check_digits(base))


def test_check_digits_reject_bad_base() -> None:
    with pytest.raises(ValueError):
        cpf_check_digits("1234")
    with pytest.raises(DigitParseError):
        cnpj_check_digits("11444777000a")


def test_format_masks() -> None:
    assert format_cpf("52998224725") == "529.982.247-25"
    assert format_cnpj("04252011000110") == "04.252.011/0001-10"
    assert format_document("529.982.247-25") == "529.982.247-25"
    assert format_document("11444777000161") == "11.444.777/0001-61"


def test_format_leaves_other_lengths_untouched() -> None:
    assert format_cpf("123") == "123"
    assert format_cnpj("52998224725") == "52998224725"
    assert format_document("12-3") == "12-3"
