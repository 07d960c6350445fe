import json
import os
import tempfile
import unittest

from domain.errors import DataSourceError, FormatError
from domain.models import Company, User
from infrastructure.json.company_repository_json import JsonCompanyRepository
from infrastructure.json.reader import read_records
from infrastructure.json.user_repository_json import JsonUserRepository


USER_RECORD = {
    "id": 1,
    "first_name": "Ann",
    "last_name": "Lee",
    "email": "a@x.com",
    "company_id": 10,
    "email_status": True,
    "active_status": True,
    "tokens": 5,
}

COMPANY_RECORD = {"id": 10, "name": "Acme", "top_up": 3, "email_status": True}


class JsonFileTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def write_file(self, name: str, content: str) -> str:
        path = os.path.join(self._tmp.name, name)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(content)
        return path


class ReadRecordsTests(JsonFileTestCase):
    def test_missing_file_is_a_data_source_error(self):
        path = os.path.join(self._tmp.name, "missing.json")
        with self.assertRaises(DataSourceError) as ctx:
            read_records(path)
        self.assertEqual(ctx.exception.path, path)
        self.assertIn("missing.json", str(ctx.exception))

    def test_directory_is_a_data_source_error(self):
        with self.assertRaises(DataSourceError):
            read_records(self._tmp.name)

    def test_invalid_json_is_a_format_error(self):
        path = self.write_file("users.json", "[{\"id\": 1,")
        with self.assertRaises(FormatError) as ctx:
            read_records(path)
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_deeply_nested_json_is_a_format_error(self):
        path = self.write_file("users.json", "[" * 100000 + "]" * 100000)
        with self.assertRaises(FormatError) as ctx:
            read_records(path)
        self.assertIsInstance(ctx.exception.__cause__, RecursionError)

    def test_top_level_must_be_an_array_of_objects(self):
        with self.assertRaises(FormatError):
            read_records(self.write_file("a.json", "{\"id\": 1}"))
        with self.assertRaises(FormatError):
            read_records(self.write_file("b.json", "[1, 2]"))

    def test_empty_array_is_fine(self):
        self.assertEqual(read_records(self.write_file("empty.json", "[]")), [])


class JsonUserRepositoryTests(JsonFileTestCase):
    def test_maps_records_and_ignores_extra_keys(self):
        path = self.write_file("users.json", json.dumps([USER_RECORD]))
        users = JsonUserRepository(path).get_all_users()
        self.assertEqual(
            users,
            [
                User(
                    id=1,
                    first_name="Ann",
                    last_name="Lee",
                    email="a@x.com",
                    company_id=10,
                    tokens=5,
                    active_status=True,
                )
            ],
        )

    def test_users_are_cached_between_calls(self):
        path = self.write_file("users.json", json.dumps([USER_RECORD]))
        repo = JsonUserRepository(path)
        repo.get_all_users()[0].tokens = 42
        self.assertEqual(repo.get_all_users()[0].tokens, 42)

    def test_missing_key_is_a_format_error(self):
        record = dict(USER_RECORD)
        del record["tokens"]
        path = self.write_file("users.json", json.dumps([record]))
        with self.assertRaises(FormatError) as ctx:
            JsonUserRepository(path).get_all_users()
        self.assertIn("'tokens'", str(ctx.exception))

    def test_wrong_type_is_a_format_error(self):
        record = dict(USER_RECORD, tokens="5")
        path = self.write_file("users.json", json.dumps([record]))
        with self.assertRaises(FormatError):
            JsonUserRepository(path).get_all_users()

    def test_bool_is_not_an_int(self):
        record = dict(USER_RECORD, tokens=True)
        path = self.write_file("users.json", json.dumps([record]))
        with self.assertRaises(FormatError):
            JsonUserRepository(path).get_all_users()


class JsonCompanyRepositoryTests(JsonFileTestCase):
    def test_maps_records(self):
        path = self.write_file("companies.json", json.dumps([COMPANY_RECORD]))
        companies = JsonCompanyRepository(path).get_all_companies()
        self.assertEqual(companies, [Company(id=10, name="Acme", top_up=3, email_status=True)])

    def test_email_status_must_be_boolean(self):
        record = dict(COMPANY_RECORD, email_status="yes")
        path = self.write_file("companies.json", json.dumps([record]))
        with self.assertRaises(FormatError):
            JsonCompanyRepository(path).get_all_companies()


if __name__ == "__main__":
    unittest.main()
