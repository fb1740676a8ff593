"""Tests for colour_matrix.core.editor — the current-matrix value object."""

import logging
import math

import pytest
from colour_matrix.core.editor import MatrixEditor
from colour_matrix.core.types import COEFFICIENT_LABELS, DEFAULT_MATRIX, IDENTITY_MATRIX

IDENTITY_TEXT = '[1,0,0,0,0, 0,1,0,0,0, 0,0,1,0,0, 0,0,0,1,0]'


class TestConstruction:
    def test_starts_at_default(self):
        assert MatrixEditor().matrix == list(DEFAULT_MATRIX)

    def test_custom_default(self):
        editor = MatrixEditor(default=IDENTITY_MATRIX)
        assert editor.matrix == list(IDENTITY_MATRIX)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            MatrixEditor([1.0] * 19)

    def test_matrix_is_a_copy(self):
        editor = MatrixEditor()
        m = editor.matrix
        m[0] = 99.0
        assert editor.matrix[0] == DEFAULT_MATRIX[0]


class TestSetCoefficient:
    def test_float(self):
        editor = MatrixEditor()
        editor.set_coefficient(4, 12.5)
        assert editor.matrix[4] == 12.5
        assert editor.matrix[:4] == list(DEFAULT_MATRIX[:4])

    def test_text(self):
        editor = MatrixEditor()
        editor.set_coefficient(0, ' 2.0 ')
        assert editor.matrix[0] == 2.0

    def test_unreadable_text_is_nan(self):
        editor = MatrixEditor()
        editor.set_coefficient(0, '')
        assert math.isnan(editor.matrix[0])

    def test_index_out_of_range(self):
        editor = MatrixEditor()
        with pytest.raises(IndexError):
            editor.set_coefficient(20, 1.0)
        with pytest.raises(IndexError):
            editor.set_coefficient(-1, 1.0)


class TestApplyCustom:
    def test_valid_replaces_all(self):
        editor = MatrixEditor()
        assert editor.apply_custom(IDENTITY_TEXT) is True
        assert editor.matrix == list(IDENTITY_MATRIX)

    def test_invalid_leaves_matrix_unchanged(self):
        editor = MatrixEditor()
        editor.set_coefficient(3, 0.7)
        before = editor.matrix
        assert editor.apply_custom('1,2,3') is False
        assert editor.matrix == before

    def test_empty_text_ignored(self):
        editor = MatrixEditor()
        assert editor.apply_custom('') is False
        assert editor.matrix == list(DEFAULT_MATRIX)

    def test_rejection_logged_at_debug_only(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='colour_matrix.core.editor'):
            MatrixEditor().apply_custom('1,2,3')
        records = [r for r in caplog.records if r.name == 'colour_matrix.core.editor']
        assert [r.levelno for r in records] == [logging.DEBUG]


class TestReset:
    def test_reset_restores_default(self):
        editor = MatrixEditor()
        editor.apply_custom(IDENTITY_TEXT)
        editor.set_coefficient(0, 5.0)
        editor.reset()
        assert editor.matrix == list(DEFAULT_MATRIX)


class TestDisplay:
    def test_as_text(self):
        editor = MatrixEditor()
        assert editor.as_text() == (
            '[1.5, 0.1, 0.1, 0.0, 0.0, 0.2, 1.2, 0.2, 0.0, 0.0, '
            '0.3, 0.3, 1.2, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0]'
        )

    def test_as_text_round_trips_through_apply_custom(self):
        editor = MatrixEditor()
        text = editor.as_text()
        other = MatrixEditor(default=IDENTITY_MATRIX)
        assert other.apply_custom(text) is True
        assert other.matrix == list(DEFAULT_MATRIX)

    def test_rows(self):
        rows = MatrixEditor().rows()
        assert len(rows) == 4
        assert all(len(row) == 5 for row in rows)
        assert rows[0][0] == ('Red from Red', 1.5)
        assert rows[3][4] == ('Alpha Bias', 0.0)


class TestLabels:
    def test_twenty_labels(self):
        assert len(COEFFICIENT_LABELS) == 20

    def test_label_order(self):
        assert COEFFICIENT_LABELS[:5] == (
            'Red from Red',
            'Red from Green',
            'Red from Blue',
            'Red from Alpha',
            'Red Bias',
        )
        assert COEFFICIENT_LABELS[9] == 'Green Bias'
        assert COEFFICIENT_LABELS[17] == 'Alpha from Blue'
