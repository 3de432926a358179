# -*- coding: utf-8 -*-
import json
import logging
import os
import shutil
import tempfile
import unittest

import cv2
import numpy as np

import main
from src.descrambler.scrambler import TileScrambler
from src.utils.logger import setup_logger


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp(prefix="descrambler_cli_")
        self.out_dir = os.path.join(self.test_dir, "out")

        original = np.random.default_rng(5).integers(0, 256, (64, 64, 3), dtype=np.uint8)
        self.page = os.path.join(self.test_dir, "page.png")
        cv2.imwrite(self.page, TileScrambler(42).scramble(original))

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def write_job(self, pages, seed=42):
        path = os.path.join(self.test_dir, "job.json")
        with open(path, 'w') as f:
            json.dump({"scramble_seed": seed, "page_list": pages}, f)
        return path

    def test_all_pages_succeed(self):
        job = self.write_job([self.page, self.page])
        self.assertEqual(main.main([job, "--out", self.out_dir, "--workers", "2"]), 0)
        self.assertTrue(os.path.exists(os.path.join(self.out_dir, "out_001.jpg")))
        self.assertTrue(os.path.exists(os.path.join(self.out_dir, "out_002.jpg")))

    def test_failed_page_sets_exit_code(self):
        job = self.write_job([self.page, os.path.join(self.test_dir, "missing.png")])
        report = os.path.join(self.test_dir, "report.json")

        self.assertEqual(main.main([job, "--out", self.out_dir, "--report", report]), 1)

        with open(report) as f:
            entries = json.load(f)
        self.assertEqual(len(entries), 2)
        self.assertIsNone(entries[0]['error'])
        self.assertEqual(entries[1]['stage'], 'download')

    def test_invalid_job_file(self):
        bad = os.path.join(self.test_dir, "bad.json")
        with open(bad, 'w') as f:
            f.write("{not json")
        self.assertEqual(main.main([bad, "--out", self.out_dir]), 2)

    def test_seed_override_range(self):
        job = self.write_job([self.page])
        with self.assertRaises(SystemExit):
            main.main([job, "--seed", "-1"])

    def test_log_level_choices(self):
        job = self.write_job([self.page])
        with self.assertRaises(SystemExit):
            main.main([job, "--log-level", "bogus"])
        self.assertEqual(main.main([job, "--out", self.out_dir, "--log-level", "debug"]), 0)

    def test_setup_logger_single_handler(self):
        logger = setup_logger(name="src.test_cli", level="info")
        setup_logger(name="src.test_cli", level="WARNING")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
