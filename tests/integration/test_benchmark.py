import os
import tempfile
import unittest

from unittest.mock import patch

from simple_set.benchmark import main, run_benchmark, _parse_args

EXPECTED_OPERATIONS = {
    "intersection_large_small",
    "intersection_small_large",
    "union",
    "difference",
    "symmetric_difference",
    "is_subset",
    "equals",
    "clone",
}


class BenchmarkArgsTests(unittest.TestCase):
    def test_defaults(self):
        args = _parse_args([])
        self.assertEqual(args.size, 100_000)
        self.assertEqual(args.small, 100)
        self.assertEqual(args.repeat, 5)
        self.assertFalse(args.debug)
        self.assertFalse(args.profile)
        self.assertIsNone(args.profile_output)

    def test_flags(self):
        args = _parse_args(["--size", "10", "--small", "2", "--repeat", "1", "--debug", "--profile"])
        self.assertEqual((args.size, args.small, args.repeat), (10, 2, 1))
        self.assertTrue(args.debug)
        self.assertTrue(args.profile)


class BenchmarkRunTests(unittest.TestCase):
    """
    Runs the benchmark end to end on small inputs
    """

    def test_run_benchmark_times_every_operation(self):
        with self.assertLogs(level="INFO"):
            results = run_benchmark(size=1000, small=10, repeat=2)
        self.assertEqual(set(results), EXPECTED_OPERATIONS)
        for timing in results.values():
            self.assertGreaterEqual(timing, 0.0)

    def test_run_benchmark_with_empty_sets(self):
        with self.assertLogs(level="INFO"):
            results = run_benchmark(size=0, small=0, repeat=1)
        self.assertEqual(set(results), EXPECTED_OPERATIONS)

    def test_main(self):
        with self.assertLogs(level="INFO") as logs:
            results = main(["--size", "500", "--small", "5", "--repeat", "1"])
        self.assertEqual(set(results), EXPECTED_OPERATIONS)
        self.assertTrue(any("size=500" in line for line in logs.output))

    def test_main_reads_sys_argv(self):
        with patch("sys.argv", ["benchmark", "--size", "50", "--repeat", "1"]):
            with self.assertLogs(level="INFO"):
                results = main()
        self.assertEqual(set(results), EXPECTED_OPERATIONS)

    def test_main_with_profile(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_file = os.path.join(tmp_dir, "bench.prof")
            with self.assertLogs(level="INFO") as logs:
                main(["--size", "100", "--repeat", "1", "--profile", "--profile-output", output_file])
            self.assertTrue(os.path.exists(output_file))
        self.assertTrue(any("Profile of run_benchmark" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
