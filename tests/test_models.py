"""Unit tests for value helpers and log redaction (pure functions)."""

from __future__ import annotations

import unittest

from litequery.models import normalise_parameters, parameter_name, row_to_record
from litequery.utils.redact import describe_parameters, redact


class TestParameterNames(unittest.TestCase):
    def test_prefixes_stripped(self):
        self.assertEqual(parameter_name("@id"), "id")
        self.assertEqual(parameter_name(":id"), "id")
        self.assertEqual(parameter_name("$id"), "id")

    def test_bare_name_kept(self):
        self.assertEqual(parameter_name("id"), "id")

    def test_only_one_prefix_stripped(self):
        self.assertEqual(parameter_name("@@id"), "@id")

    def test_normalise(self):
        self.assertEqual(normalise_parameters({"@id": 1, "name": None}), {"id": 1, "name": None})

    def test_normalise_duplicate_placeholder_rejected(self):
        with self.assertRaises(ValueError):
            normalise_parameters({"@id": 1, "id": 2})
        with self.assertRaises(ValueError):
            normalise_parameters({":id": 1, "$id": 2})

    def test_normalise_empty(self):
        self.assertEqual(normalise_parameters(None), {})
        self.assertEqual(normalise_parameters({}), {})


class TestRowToRecord(unittest.TestCase):
    def test_null_is_none(self):
        self.assertEqual(row_to_record(["id", "name"], (1, None)), {"id": 1, "name": None})


class TestRedact(unittest.TestCase):
    def test_string_literals_hidden(self):
        sql = "INSERT INTO t VALUES (1, 'secret', 'it''s')"
        self.assertEqual(redact(sql), "INSERT INTO t VALUES (1, '[REDACTED]', '[REDACTED]')")

    def test_blob_literal_hidden(self):
        self.assertEqual(redact("SELECT X'DEADBEEF'"), "SELECT [BLOB]")

    def test_placeholders_untouched(self):
        sql = "SELECT * FROM t WHERE id = @id"
        self.assertEqual(redact(sql), sql)

    def test_describe_parameters_names_only(self):
        self.assertEqual(describe_parameters({"@id": 1, "@pw": "hunter2"}), "@id, @pw")
        self.assertEqual(describe_parameters(None), "-")
