# test_script_engine.py

import pytest
import unicodedata

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unitext.errors import NoSuchCombination, UnknownAxis
from unitext.script.definitions import (
    IDENTITY, ScriptDefinitions, StyleAxis, TransformSpec, combination_key,
)
from unitext.script.resolver import StyleResolver, parse_axis, resolve
from unitext.script.transformer import Transformer

B, I, F, S = StyleAxis.BOLD, StyleAxis.ITALIC, StyleAxis.FRAKTUR, StyleAxis.SCRIPT
D, SS, M, RI = (StyleAxis.DOUBLE_STRUCK, StyleAxis.SANS_SERIF,
                StyleAxis.MONOSPACE, StyleAxis.REGIONAL_INDICATOR)

LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
DIGITS = '0123456789'
REGISTERED = [
    {B}, {I}, {B, I}, {S}, {B, S}, {F}, {D}, {B, F},
    {SS}, {B, SS}, {I, SS}, {B, I, SS}, {M}, {RI},
]


class TestDefinitions:
    """Registry construction and validation."""

    def setup_method(self):
        self.definitions = ScriptDefinitions()

    def test_registers_fourteen_combinations(self):
        assert len(self.definitions) == 14
        for axes in REGISTERED:
            assert combination_key(axes) in self.definitions

    def test_key_is_order_independent(self):
        assert combination_key([I, B]) == combination_key([B, I]) == 'bold+italic'
        assert combination_key([B, B, I]) == 'bold+italic'

    def test_duplicate_combination_rejected(self):
        table = [((B,), 0x1D400, None, {}), ((B,), 0x1D500, None, {})]
        with pytest.raises(ValueError, match="Duplicate"):
            ScriptDefinitions(table)

    def test_overlapping_base_rejected(self):
        table = [((B,), 0x1D400, None, {}), ((I,), 0x1D400, None, {})]
        with pytest.raises(ValueError, match="already registered"):
            ScriptDefinitions(table)

    def test_empty_combination_rejected(self):
        with pytest.raises(ValueError, match="identity"):
            ScriptDefinitions([((), 0x1D400, None, {})])

    def test_multi_character_exception_rejected(self):
        table = [((B,), 0x1D400, None, {'exceptions': {'A': 'xy'}})]
        with pytest.raises(ValueError, match="one character"):
            ScriptDefinitions(table)


class TestResolver:
    """Resolving axis sets to registered transform specs."""

    def setup_method(self):
        self.resolver = StyleResolver()

    def test_empty_set_is_identity(self):
        assert self.resolver.resolve(set()) is IDENTITY
        assert IDENTITY.lowercase_offset == 32
        assert IDENTITY.digit_base is None

    @pytest.mark.parametrize("axes", REGISTERED)
    def test_every_registered_combination_resolves(self, axes):
        spec = self.resolver.resolve(axes)
        assert spec.axes == frozenset(axes)

    def test_bases_match_table(self):
        assert self.resolver.resolve({B}).letter_base == 0x1D400
        assert self.resolver.resolve({B}).digit_base == 0x1D7CE
        assert self.resolver.resolve({B, I, SS}).letter_base == 0x1D63C
        assert self.resolver.resolve({RI}).letter_base == 0x1F1E6

    def test_unknown_combination_fails_closed(self):
        with pytest.raises(NoSuchCombination) as excinfo:
            self.resolver.resolve({F, I})
        assert excinfo.value.axes == frozenset({F, I})
        assert 'fraktur+italic' in str(excinfo.value)

    def test_module_level_resolve(self):
        assert resolve([I, B]).letter_base == 0x1D468

    def test_resolve_names_splits_compound_names(self):
        assert self.resolver.resolve_names(['italic+bold']).letter_base == 0x1D468
        assert self.resolver.resolve_names(['bold,sans']).letter_base == 0x1D5D4
        assert self.resolver.resolve_names(['sans-serif', 'italic', 'bold']).letter_base == 0x1D63C
        assert self.resolver.resolve_names([]) is IDENTITY

    def test_resolve_names_unknown_name(self):
        with pytest.raises(UnknownAxis, match="unknown style"):
            self.resolver.resolve_names(['shiny'])

    def test_resolve_names_still_fails_closed(self):
        with pytest.raises(NoSuchCombination):
            self.resolver.resolve_names(['fraktur+italic'])

    def test_parse_axis_aliases(self):
        assert parse_axis('Double_Struck') is D
        assert parse_axis('doublestruck') is D
        assert parse_axis('mono') is M
        assert parse_axis('SANS') is SS
        assert parse_axis('regional-indicator') is RI


class TestTransformer:
    """Per-character conversion."""

    def transformer(self, *axes):
        return Transformer(resolve(axes))

    def test_identity_law(self):
        t = Transformer(IDENTITY)
        for c in LETTERS + DIGITS:
            assert t.transform(c) == c

    @pytest.mark.parametrize("axes", REGISTERED)
    def test_injective_over_accepted_characters(self, axes):
        t = Transformer(resolve(axes))
        accepted = [c for c in LETTERS + DIGITS if t.accepts(c)]
        outputs = [t.transform(c) for c in accepted]
        assert len(set(outputs)) == len(accepted)
        assert all(o != c for o, c in zip(outputs, accepted))

    @pytest.mark.parametrize("axes", REGISTERED)
    def test_outputs_are_named_characters(self, axes):
        t = Transformer(resolve(axes))
        for c in LETTERS + DIGITS:
            if t.accepts(c):
                assert unicodedata.name(t.transform(c), ''), (c, hex(ord(t.transform(c))))

    def test_bold_letters(self):
        t = self.transformer(B)
        assert t.transform('A') == '\U0001D400'
        assert t.transform('a') == '\U0001D41A'
        assert t.transform('z') == '\U0001D433'

    @pytest.mark.parametrize("axes,char,expected", [
        ((I,), 'h', 'ℎ'),
        ((S,), 'B', 'ℬ'),
        ((S,), 'o', 'ℴ'),
        ((F,), 'Z', 'ℨ'),
        ((F,), 'C', 'ℭ'),
        ((D,), 'R', 'ℝ'),
        ((D,), 'N', 'ℕ'),
    ])
    def test_exceptions_win_over_arithmetic(self, axes, char, expected):
        assert self.transformer(*axes).transform(char) == expected

    def test_italic_g_uses_arithmetic(self):
        assert self.transformer(I).transform('g') == '\U0001D454'

    def test_monospace_letters(self):
        t = self.transformer(M)
        assert t.transform('A') == '\U0001D670'
        assert t.transform('a') == '\U0001D68A'

    @pytest.mark.parametrize("axes,digit_base", [
        ((B,), 0x1D7CE),
        ((D,), 0x1D7D8),
        ((SS,), 0x1D7E2),
        ((B, SS), 0x1D7EC),
        ((M,), 0x1D7F6),
    ])
    def test_digit_styles(self, axes, digit_base):
        assert self.transformer(*axes).transform('7') == chr(digit_base + 7)

    @pytest.mark.parametrize("axes", [(I,), (S,), (F,)])
    def test_styles_without_digits_leave_digits(self, axes):
        assert self.transformer(*axes).transform('7') == '7'

    @pytest.mark.parametrize("axes", REGISTERED)
    def test_non_letters_pass_through(self, axes):
        t = Transformer(resolve(axes))
        assert t.transform(' ') == ' '
        assert t.transform('.') == '.'
        if t.spec.digit_base is None:
            assert t.transform('3') == '3'

    def test_regional_indicator_uppercase_only(self):
        t = self.transformer(RI)
        assert t.transform('A') == '\U0001F1E6'
        assert t.transform('Z') == '\U0001F1FF'
        assert not t.accepts('a')
        assert t.transform('a') == 'a'

    def test_spec_is_immutable(self):
        spec = resolve([B])
        with pytest.raises(AttributeError):
            spec.letter_base = 0

    def test_custom_spec(self):
        spec = TransformSpec(frozenset({B}), letter_base=0xFF21, digit_base=0xFF10)
        t = Transformer(spec)
        assert t('A') == 'Ａ'
        assert t('0') == '０'
