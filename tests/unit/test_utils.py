import os
import tempfile
import unittest

from simple_set.utils import profile, UNHASHABLE_ELEMENT_STRING


def _add_one(x: int) -> int:
    return x + 1


class ProfilerTests(unittest.TestCase):
    def test_profile_keeps_return_value_and_name(self):
        decorated = profile(_add_one)
        with self.assertLogs(level="INFO") as logs:
            self.assertEqual(decorated(41), 42)
        self.assertEqual(decorated.__name__, "_add_one")
        self.assertTrue(any("Profile of _add_one" in line for line in logs.output))

    def test_profile_dumps_stats_to_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_file = os.path.join(tmp_dir, "stats.prof")
            decorated = profile(output_file=output_file)(_add_one)
            with self.assertLogs(level="INFO"):
                decorated(1)
            self.assertTrue(os.path.exists(output_file))

    def test_profile_propagates_exceptions(self):
        @profile
        def boom():
            raise ValueError("boom")

        with self.assertLogs(level="INFO"):
            with self.assertRaises(ValueError):
                boom()


class ErrorStringTests(unittest.TestCase):
    def test_unhashable_element_string_names_type(self):
        self.assertEqual(
            UNHASHABLE_ELEMENT_STRING.format(type_name="list"),
            "unhashable type: 'list' cannot be stored in a HashSet",
        )


if __name__ == "__main__":
    unittest.main()
