#!/usr/bin/env python3
"""
Tests for states.py
"""

from cuti.constants import STATES
from cuti.normalize.states import STATE_ALIASES, normalize_state


def test_generic_transform():
    tests = [
        ('Johor', 'johor'),
        ('Kuala Lumpur', 'kuala-lumpur'),
        ('Negeri Sembilan', 'negeri-sembilan'),
        ('  Pahang ', 'pahang'),
        ('Trengganu & Kelantan', 'trengganu-and-kelantan'),
    ]

    for label, expected in tests:
        result = normalize_state(label)
        assert result == expected, f"{label!r}: expected {expected}, got {result}"


def test_aliases():
    assert normalize_state('Malacca') == 'melaka'
    assert normalize_state('KualaLumpur') == 'kuala-lumpur'
    assert normalize_state('Putrajaya Selangor') == 'putrajaya'
    assert normalize_state('Putrajaya & Selangor') == 'putrajaya'
    assert normalize_state('putrajayaand-selangor') == 'putrajaya'


def test_canonical_states_pass_through():
    for state in STATES:
        assert normalize_state(state) == state


def test_idempotent():
    labels = [
        'Kuala Lumpur', 'Malacca', 'Putrajaya & Selangor', 'KualaLumpur',
        'Pulau Pinang', ' SABAH ', 'a & b', 'x  y',
    ] + list(STATE_ALIASES) + list(STATE_ALIASES.values())

    for label in labels:
        once = normalize_state(label)
        assert normalize_state(once) == once, f"not idempotent for {label!r}"


def test_alias_targets_are_canonical():
    for target in STATE_ALIASES.values():
        assert target in STATES
