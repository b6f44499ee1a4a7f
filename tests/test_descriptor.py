from dataclasses import replace

from sparsela.descriptor import Descriptor


def test_defaults_match_source():
    desc = Descriptor()
    assert desc.push_only is False
    assert desc.pull_only is False
    assert desc.push_pull is True
    assert desc.front_factor == 0.1
    assert desc.discovered_factor == 0.7
    assert desc.early_exit is False
    assert desc.struct_only is False
    assert desc.label == ""


def test_fields_are_settable():
    desc = Descriptor()
    desc.early_exit = True
    desc.struct_only = True
    desc.front_factor = 0.05
    assert desc.early_exit is True
    assert desc.struct_only is True
    assert desc.front_factor == 0.05


def test_keyword_construction_and_equality():
    a = Descriptor(push_only=True, push_pull=False, label="bfs")
    b = replace(Descriptor(), push_only=True, push_pull=False, label="bfs")
    assert a == b
    assert a != Descriptor()


def test_instances_are_independent():
    a = Descriptor()
    b = Descriptor()
    a.pull_only = True
    assert b.pull_only is False