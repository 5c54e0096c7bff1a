"""
Tests del coordinador BRN (format 2019 + clàssic)
"""
import random
import pytest
from myssm.brn import BRN, FormatName
from myssm.exceptions import GenerateError, InvalidFormatError, ParseError, UnknownFormatError
from myssm.models.entity_code import EntityCode
from myssm.models.format_response import BRNFormat, Format2019, FormatClassic
from myssm.parsers.format_2019_parser import current_year

NEXT_YEAR = current_year() + 1


# ---------------------------------------------------------------------------
# Corpus de referència
# (text, valid, 2019 valid, any, codi, seqüència, 2019 és ROB,
#  clàssic valid, seqüència clàssica, dígit control, clàssic és ROB)
# ---------------------------------------------------------------------------

CORPUS = {
    "formal": ("201901000005 (1312525-A)", True, True, 2019, "01", "000005", False, True, "1312525", "A", False),
    "formal_invalid_roc": ("201901000005 (131B5D5-A)", True, True, 2019, "01", "000005", False, False, None, None, False),
    "formal_no_space_1": ("201202003209(TR018426S)", True, True, 2012, "02", "003209", False, False, None, None, False),
    "formal_no_space_2": ("201903003209(TR0184266S)", True, True, 2019, "03", "003209", True, True, "TR0184266", "S", True),
    "formal_no_space_3": ("201903003209(000184266S)", True, True, 2019, "03", "003209", True, True, "000184266", "S", True),
    "formal_hyphen": ("201405002005(1312885-Z)", True, True, 2014, "05", "002005", False, True, "1312885", "Z", False),
    "formal_not_rob": ("201409002005(1312885-Z)", True, False, None, None, None, False, True, "1312885", "Z", False),
    "formal_rob_only": ("2019003209(000184266S)", True, False, None, None, None, False, True, "000184266", "S", True),
    "formal_invalid": ("2019003209(00084266S)", False, False, None, None, None, False, False, None, None, False),
    "formal_invalid_rob": ("197003005359(00001CB39-A)", True, True, 1970, "03", "005359", True, False, None, None, False),

    "brn2019_1": ("198501011959", True, True, 1985, "01", "011959", False, False, None, None, False),
    "brn2019_2": ("198301007970", True, True, 1983, "01", "007970", False, False, None, None, False),
    "brn2019_3": ("202003007970", True, True, 2020, "03", "007970", True, False, None, None, False),
    "brn2019_next_year": (f"{NEXT_YEAR}01007970", False, False, None, None, None, False, False, None, None, False),
    "brn2019_entity_08": ("202008007970", False, False, None, None, None, False, False, None, None, False),
    "brn2019_11_digits": ("20200007970", False, False, None, None, None, False, False, None, None, False),

    "roc_1": ("412121K", True, False, None, None, None, False, True, "412121", "K", False),
    "roc_2": ("226784T", True, False, None, None, None, False, True, "226784", "T", False),
    "roc_3": ("63871D", True, False, None, None, None, False, True, "63871", "D", False),
    "roc_4": ("22685U", True, False, None, None, None, False, True, "22685", "U", False),
    "roc_invalid": ("bc0053-B", False, False, None, None, None, False, False, None, None, False),

    "rob_1": ("AC0000003-D", True, False, None, None, None, False, True, "AC0000003", "D", True),
    "rob_2": ("000125034-M", True, False, None, None, None, False, True, "000125034", "M", True),
    "rob_3": ("JM0125034-M", True, False, None, None, None, False, True, "JM0125034", "M", True),
    "rob_3_space": ("JM 0125034-M", True, False, None, None, None, False, True, "JM0125034", "M", True),
    "rob_invalid": ("AA00188141-T", False, False, None, None, None, False, False, None, None, False),
    "rob_invalid_2": ("AA001Z8141-T", False, False, None, None, None, False, False, None, None, False),
}


@pytest.mark.parametrize("row", CORPUS.values(), ids=CORPUS.keys())
def test_corpus(row):
    (text, valid, valid_2019, year, entity_code, sequence, is_rob,
     valid_classic, classic_sequence, check_digit, classic_is_rob) = row

    brn = BRN.parse(text)

    assert brn.is_valid() is valid
    assert brn.format2019.is_valid() is valid_2019
    assert brn.format2019.get_year() == year
    assert brn.format2019.get_entity_code() == entity_code
    assert brn.format2019.get_sequence_number() == sequence
    assert brn.format2019.is_entity(EntityCode.Business) is is_rob

    assert brn.classic.is_valid() is valid_classic
    assert brn.classic.get_sequence_number() == classic_sequence
    assert brn.classic.get_check_digit() == check_digit
    assert brn.classic.is_entity(EntityCode.Business) is classic_is_rob


# ---------------------------------------------------------------------------
# Escenaris concrets
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_formal_combined(self):
        brn = BRN.parse("201901000005 (1312525-A)")
        assert brn.classic.get_entity_type() is EntityCode.LocalCompany
        assert brn.to_formal() == "201901000005 (1312525-A)"
        assert str(brn) == "201901000005 (1312525-A)"

    def test_llp(self):
        brn = BRN.parse("LLP0027514-LGN")
        assert brn.classic.is_valid() is True
        assert brn.classic.get_sequence_number() == "LLP0027514"
        assert brn.classic.get_check_digit() == "LGN"
        assert brn.classic.get_entity_type() is EntityCode.LLP

    def test_af(self):
        brn = BRN.parse("AF123456")
        assert brn.classic.get_sequence_number() == "AF123456"
        assert brn.classic.get_check_digit() is None
        assert brn.classic.get_entity_type() is EntityCode.LLP

    def test_ll_too_long(self):
        assert BRN.parse("LL1234567").classic.is_valid() is False

    def test_unknown_entity_has_message(self):
        brn = BRN.parse("202008007970")
        assert brn.format2019.is_valid() is False
        assert brn.format2019.get_error_message()

    def test_lowercase_input(self):
        brn = BRN.parse("jm0125034-m")
        assert brn.classic.get_sequence_number() == "JM0125034"

    def test_classic_only_formal(self):
        assert BRN.parse("412121K").to_formal() == "412121-K"

    def test_2019_only_formal(self):
        assert BRN.parse("198501011959").to_formal() == "198501011959"

    def test_invalid_formal(self):
        brn = BRN.parse("no brn here")
        assert brn.to_formal() is None
        assert str(brn) == ""

    def test_both_results_always_present(self):
        brn = BRN.parse("")
        assert isinstance(brn.format2019, Format2019)
        assert isinstance(brn.classic, FormatClassic)
        assert all(isinstance(f, BRNFormat) for f in brn.formats())
        assert brn.is_valid() is False

    def test_idempotent(self):
        for text in ("201901000005 (1312525-A)", "201903003209(TR0184266S)",
                     "LLP0027514-LGN", "AF123456", "412121K", "0027514-LCA"):
            first = BRN.parse(text)
            second = BRN.parse(str(first))
            assert second.is_valid() is True
            assert str(second) == str(first)
            assert second.format2019.get_sequence_number() == first.format2019.get_sequence_number()
            assert second.classic.get_sequence_number() == first.classic.get_sequence_number()
            assert second.classic.get_check_digit() == first.classic.get_check_digit()

    def test_short_roc_needs_leading_zeros_to_reparse(self):
        # Sense zeros la seqüència queda per sota dels 3 dígits del ROC
        brn = BRN.parse("0000012-K")
        assert str(brn) == "12-K"
        assert BRN.parse(str(brn)).is_valid() is False
        brn.classic.leading_zeros()
        assert str(brn) == "0000012-K"
        again = BRN.parse(str(brn))
        assert again.classic.get_sequence_number() == "12"
        assert again.classic.get_check_digit() == "K"

    def test_whitespace_inside_classic(self):
        brn = BRN.parse("ROC no: JM\t0125034 M")
        assert brn.classic.is_valid() is True
        assert brn.to_formal() == "JM0125034-M"


# ---------------------------------------------------------------------------
# Mode estricte
# ---------------------------------------------------------------------------

class TestStrict:
    def test_valid_does_not_raise(self):
        assert BRN.parse("412121K", strict=True).is_valid() is True

    def test_invalid_raises(self):
        with pytest.raises(InvalidFormatError):
            BRN.parse("AA00188141-T", strict=True)

    def test_non_strict_never_raises(self):
        brn = BRN.parse(None)
        assert brn.is_valid() is False

    def test_structural_error_wrapped(self):
        with pytest.raises(ParseError) as exc:
            BRN.parse(None, strict=True)
        assert isinstance(exc.value.__cause__, AttributeError)


# ---------------------------------------------------------------------------
# Accés per nom
# ---------------------------------------------------------------------------

class TestGetFormat:
    def test_by_name(self):
        brn = BRN.parse("201901000005 (1312525-A)")
        assert brn.get_format("format2019") is brn.format2019
        assert brn.get_format("classic") is brn.classic

    def test_by_enum(self):
        brn = BRN.parse("412121K")
        assert brn.get_format(FormatName.CLASSIC) is brn.classic

    def test_unknown(self):
        with pytest.raises(UnknownFormatError):
            BRN.parse("412121K").get_format("format2020")


# ---------------------------------------------------------------------------
# Generació
# ---------------------------------------------------------------------------

class TestMake:
    def test_random_are_valid(self):
        rng = random.Random(2024)
        for _ in range(100):
            brn = BRN.make(rng=rng)
            assert brn.is_valid() is True
            assert brn.format2019.is_valid() is True
            assert brn.classic.is_valid() is True

    def test_year_and_entity(self):
        brn = BRN.make(2010, EntityCode.Business, rng=random.Random(8))
        assert brn.format2019.get_year() == 2010
        assert brn.format2019.is_entity(EntityCode.Business) is True
        assert brn.classic.is_valid() is True

    def test_foreign_company(self):
        brn = BRN.make(entity_code=EntityCode.ForeignCompany, rng=random.Random(4))
        assert brn.format2019.get_entity_code() == "02"
        assert brn.classic.is_entity(EntityCode.ForeignCompany) is True

    def test_llp_family(self):
        rng = random.Random(6)
        for entity in EntityCode.llp_codes():
            brn = BRN.make(entity_code=entity, rng=rng)
            assert brn.format2019.is_entity(entity) is True
            assert brn.classic.is_entity(EntityCode.LLP) is True

    def test_future_year_strict(self):
        with pytest.raises(GenerateError):
            BRN.make(NEXT_YEAR)

    def test_future_year_non_strict(self):
        assert BRN.make(NEXT_YEAR, strict=False) is None

    def test_bad_argument_non_strict(self):
        assert BRN.make("2020", strict=False) is None

    def test_bad_argument_strict(self):
        with pytest.raises(GenerateError) as exc:
            BRN.make("2020")
        assert isinstance(exc.value.__cause__, TypeError)

    def test_generated_formal_round_trip(self):
        # Amb zeros inicials la seqüència ROC sempre té 7 dígits
        brn = BRN.make(entity_code=EntityCode.LocalCompany, rng=random.Random(99))
        brn.classic.leading_zeros()
        again = BRN.parse(str(brn), strict=True)
        assert again.format2019.to_formal() == brn.format2019.to_formal()
        assert again.classic.leading_zeros().to_formal() == brn.classic.to_formal()
