import dataclasses

import pytest

from exerciser.lessons.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Order,
    Package,
    UnitStruct,
    classify_character,
    create_order_template,
    current_favorite_color,
    drain_optionals,
    is_a_color_word,
    nice_slice,
    normalize_strings,
    optional_numbers,
)


def test_classic_c_structs():
    green = ColorClassicStruct(name="green", hex="#00FF00")
    assert green.name == "green"
    assert green.hex == "#00FF00"


def test_tuple_structs():
    green = ColorTupleStruct("green", "#00FF00")
    assert green[0] == "green"
    assert green[1] == "#00FF00"


def test_unit_structs():
    unit_struct = UnitStruct()
    message = f"{unit_struct!r}s are fun!"
    assert message == "UnitStructs are fun!"


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert template == Order("Bob", 2019, False, False, True, 123, 0)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="Weightless package!"):
        Package("Spain", "Austria", -2210)


def test_zero_weight_package_fails():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500


def test_optional_numbers_invariants():
    numbers = optional_numbers()
    assert len(numbers) == 5
    assert numbers == sorted(numbers)
    assert all(0 <= n <= 65535 for n in numbers)


def test_drain_optionals_pops_from_the_end():
    assert drain_optionals(list(range(1, 10))) == [9, 8, 7, 6, 5, 4, 3, 2, 1]


def test_drain_optionals_stops_at_missing_value():
    values = [1, None, 2, 3]
    assert drain_optionals(values) == [3, 2]
    assert values == [1, None, 2, 3]


def test_drain_optionals_empty():
    assert drain_optionals([]) == []


def test_current_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize(
    ("word", "expected"),
    [("green", True), ("blue", True), ("red", True), ("purple", False), ("", False)],
)
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


@pytest.mark.parametrize(
    ("character", "expected"),
    [
        ("C", "Alphabetical!"),
        ("7", "Numerical!"),
        ("🌵", "Neither alphabetic nor numeric!"),
        ("%", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(character, expected):
    assert classify_character(character) == expected


def test_classify_character_rejects_strings():
    with pytest.raises(ValueError):
        classify_character("ab")


def test_slice_out_of_array():
    assert list(nice_slice([1, 2, 3, 4, 5])) == [2, 3, 4]


def test_slice_too_short():
    with pytest.raises(IndexError):
        nice_slice([1, 2])


def test_indexing_tuple_via_struct():
    numbers = ColorTupleStruct("first", "second")
    assert numbers[1] == "second"


def test_normalize_strings():
    values = ["blue", b"red", "  hello there ".strip(), "mY sHiFt".lower(), 5]
    assert normalize_strings(values) == ["blue", "red", "hello there", "my shift", "5"]