import pytest

from sterling_change.change.change_solver import NoExactChangeError
from sterling_change.domain.monetary.denomination import Denomination
from sterling_change.domain.monetary.denomination_registry import LSD, LSD_COINS, LSD_COMMON
from sterling_change.domain.monetary.denomination_system import DenominationSystem


def test_predefined_systems():
    assert LSD.values == [1, 2, 6, 12, 24, 48, 60, 120, 480, 2400, 4800]
    assert Denomination.CROWN not in LSD_COMMON.denominations
    assert all(not d.is_note for d in LSD_COINS.denominations)
    assert LSD.has_unit


def test_members_are_sorted_ascending():
    system = DenominationSystem("TEST_SORT", "Test", [Denomination.FLORIN, Denomination.PENNY, Denomination.SHILLING])
    assert system.denominations == (Denomination.PENNY, Denomination.SHILLING, Denomination.FLORIN)
    assert system.values == [2, 24, 48]
    assert not system.has_unit


def test_code_is_normalized():
    system = DenominationSystem(" lower ", "Lower case code", [Denomination.PENNY])
    assert system.code == "LOWER"


@pytest.mark.parametrize(
    "code, name, denominations, error",
    [
        ("", "Empty code", [Denomination.PENNY], ValueError),
        ("X", " ", [Denomination.PENNY], ValueError),
        ("X", "No members", [], ValueError),
        ("X", "Duplicates", [Denomination.PENNY, Denomination.PENNY], ValueError),
        ("X", "Not a denomination", [Denomination.PENNY, 24], TypeError),
    ],
)
def test_invalid_systems_rejected(code, name, denominations, error):
    with pytest.raises(error):
        DenominationSystem(code, name, denominations)


def test_make_change():
    assert LSD.make_change(4626) == [
        Denomination.FIVE_POUND,
        Denomination.ONE_POUND,
        Denomination.ONE_POUND,
        Denomination.ONE_POUND,
        Denomination.ONE_POUND,
        Denomination.CROWN,
        Denomination.CROWN,
        Denomination.HALF_CROWN,
        Denomination.THREEPENCE,
    ]
    assert LSD.make_change(0) == []


def test_make_change_without_unit():
    system = DenominationSystem("SILVER", "Silver coins", [Denomination.SIXPENCE, Denomination.SHILLING, Denomination.FLORIN])
    assert system.make_change(96) == [Denomination.FLORIN, Denomination.FLORIN]
    assert not system.find_change(7).feasible
    with pytest.raises(NoExactChangeError):
        system.make_change(7)


def test_registry_lookup():
    assert DenominationSystem.from_str("lsd") is LSD
    assert DenominationSystem.from_str("LSD_COINS") is LSD_COINS


def test_registry_unknown_code():
    with pytest.raises(ValueError, match=r"No denomination system is registered under code 'GUINEA'.*LSD \(Pre-decimal sterling\)"):
        DenominationSystem.from_str("GUINEA")


def test_registry_refuses_silent_overwrite():
    system = DenominationSystem("TEST_REGISTRY", "Test", [Denomination.PENNY])
    DenominationSystem.register(system)
    with pytest.raises(ValueError, match="already exists"):
        DenominationSystem.register(DenominationSystem("TEST_REGISTRY", "Other", [Denomination.SHILLING]))

    replacement = DenominationSystem("TEST_REGISTRY", "Other", [Denomination.SHILLING])
    DenominationSystem.register(replacement, overwrite=True)
    assert DenominationSystem.from_str("TEST_REGISTRY") is replacement


def test_register_rejects_other_types():
    with pytest.raises(TypeError):
        DenominationSystem.register("LSD")


def test_make_change_above_limit_rejected():
    with pytest.raises(ValueError, match=r"\$target must be <= 1000000"):
        LSD.make_change(1_000_001)
