import dataclasses

import pytest

from rustlings.exercises.structures import (
    ChangeColor,
    ColorClassicStruct,
    ColorTupleStruct,
    Echo,
    Licensed,
    MachineState,
    Move,
    OtherSoftware,
    Package,
    Point,
    Quit,
    SomeSoftware,
    UnitLikeStruct,
    Wrapper,
    append_bar,
    compare_license_types,
    create_order_template,
)


def test_match_message_call(capsys):
    state = MachineState(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        MachineState().process("jump")


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


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
    assert template.name == "Bob"
    assert template.year == 2019
    assert template.made_by_email is True
    assert template.item_number == 123
    assert template.count == 0


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="Can not ship a weightless package."):
        Package("Spain", "Austria", -2210)


def test_zero_weight_package_fails():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international()


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert not package.is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware())


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware())


def test_compare_license_detects_difference():
    class Custom(Licensed):
        def licensing_info(self) -> str:
            return "Other terms"

    assert compare_license_types(SomeSoftware(), Custom()) is False


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"