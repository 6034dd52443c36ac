import dataclasses

from drillrunner.drills.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Order,
    UnitStruct,
    create_order_template,
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


def test_unit_struct_repr():
    assert repr(UnitStruct()) == "UnitStruct"


def test_template_values():
    template = create_order_template()
    assert template == Order("Bob", 2019, False, False, True, 123, 0)


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
    assert order_template.name == "Bob"