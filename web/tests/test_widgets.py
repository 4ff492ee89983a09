"""Tests for utils/widgets.py"""
from collections import namedtuple

from scantext.utils.widgets import (
    alter_reference_widget,
    parse_selected_ids,
    selected_ids_argument,
    term_reference_widget,
)

Ref = namedtuple('Ref', ['id'])


def test_selected_ids_argument():
    assert selected_ids_argument([Ref(3), Ref(12), None, Ref(None), Ref(40)]) == '3+12+40'
    assert selected_ids_argument([]) == ''


def test_parse_selected_ids():
    assert parse_selected_ids('3+12+40') == [3, 12, 40]
    assert parse_selected_ids('3 12') == [3, 12]
    assert parse_selected_ids('3++x+7') == [3, 7]
    assert parse_selected_ids(None) == []


def test_alter_reference_widget():
    element = {'type': 'entity_autocomplete', 'target_type': 'taxonomy_term'}

    alter_reference_widget(element, [Ref(1), Ref(2)])

    assert element['selection_settings'] == {'selected': '1+2'}


def test_alter_ignores_other_targets():
    element = {'type': 'entity_autocomplete', 'target_type': 'node'}

    assert alter_reference_widget(element, [Ref(1)]) == {'type': 'entity_autocomplete', 'target_type': 'node'}


def test_term_reference_widget():
    widget = term_reference_widget('tags', [Ref(10), Ref(11)], 'tags')

    assert widget['target_bundle'] == 'tags'
    assert widget['selection_settings']['selected'] == '10+11'
    assert widget['default_value'] == [Ref(10), Ref(11)]
