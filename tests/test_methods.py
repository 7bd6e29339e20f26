import pytest

from hilal.methods import AsrConvention, CalculationMethod
from hilal.policy import Strictness, UnknownMethodError


def test_lookup_is_case_insensitive():
    assert CalculationMethod.lookup(" ISNA ") is CalculationMethod.ISNA
    assert CalculationMethod.lookup("makkah") is CalculationMethod.MAKKAH


def test_unknown_method_falls_back_to_mwl():
    assert CalculationMethod.lookup("moonsighting") is CalculationMethod.MWL


def test_unknown_method_raises_when_strict():
    with pytest.raises(UnknownMethodError):
        CalculationMethod.lookup("moonsighting", Strictness.STRICT)
    with pytest.raises(KeyError):
        CalculationMethod.lookup("", Strictness.STRICT)


def test_method_parameters():
    mwl = CalculationMethod.MWL.params
    assert (mwl.fajr_angle, mwl.isha_angle, mwl.aladhan_id) == (18, 17, 3)
    assert CalculationMethod.MAKKAH.isha_is_interval
    assert not CalculationMethod.EGYPT.isha_is_interval
    assert {m.params.aladhan_id for m in CalculationMethod} == {0, 1, 2, 3, 4, 5, 7, 11}


def test_asr_convention():
    assert AsrConvention.lookup("Hanafi") is AsrConvention.HANAFI
    assert AsrConvention.lookup("shafi") is AsrConvention.STANDARD
    assert AsrConvention.STANDARD.factor == 1
    assert AsrConvention.HANAFI.factor == 2


def test_method_table_is_read_only():
    from hilal.methods import _METHOD_PARAMS

    with pytest.raises(TypeError):
        _METHOD_PARAMS[CalculationMethod.MWL] = CalculationMethod.ISNA.params
