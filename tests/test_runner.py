"""
Tests for the search runner CLI and its run artifacts.

Tests verify:
1. Artifacts are written with the expected shape
2. Same seed gives byte-identical event logs
3. Manifest hash covers the manifest body
"""

import json

import pytest

from inference_lab.runlog import RunLog
from inference_lab.runners.run_search import SearchRunner, main


SMALL = ["--gd-steps", "20", "--sa-steps", "50", "--mc-samples", "40"]


def run_cli(out_dir, *extra):
	main(["--out", str(out_dir)] + SMALL + list(extra))


class TestSearchRunner:

	def test_writes_artifacts(self, tmp_path, capsys):
		run_cli(tmp_path)
		printed = capsys.readouterr().out
		assert "[search] gradient_descent" in printed
		for name in ("manifest.json", "summary.json", "events.jsonl"):
			assert (tmp_path / name).exists()
		summary = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
		assert len(summary) == 3
		assert {r["label"] for r in summary} == set(SearchRunner.LABELS.values())
		losses = [r["best_loss"] for r in summary]
		assert losses == sorted(losses)

	def test_events_cover_every_algorithm(self, tmp_path):
		run_cli(tmp_path)
		lines = (tmp_path / "events.jsonl").read_text(encoding="utf-8").splitlines()
		records = [json.loads(l) for l in lines]
		sources = {r["source"] for r in records}
		assert sources == set(SearchRunner.LABELS)
		for src in sources:
			mine = [r for r in records if r["source"] == src]
			assert [r["t"] for r in mine] == list(range(len(mine)))
			assert mine[0]["kind"] == "start"
			assert mine[-1]["kind"] == "terminate"

	def test_same_seed_same_events(self, tmp_path):
		a, b = tmp_path / "a", tmp_path / "b"
		run_cli(a, "--seed", "7")
		run_cli(b, "--seed", "7")
		assert (a / "events.jsonl").read_bytes() == (b / "events.jsonl").read_bytes()
		assert (a / "manifest.json").read_bytes() == (b / "manifest.json").read_bytes()

	def test_manifest_hash(self, tmp_path):
		run_cli(tmp_path, "--loss", "loss")
		man = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
		digest = man.pop("manifest_hash")
		assert digest == RunLog.sha256_hex(RunLog.canonical_json(man).encode("utf-8"))
		assert man["settings"]["loss"] == "loss"
		assert man["settings"]["gradient_descent"]["max_steps"] == 20

	def test_unknown_loss(self):
		with pytest.raises(ValueError):
			SearchRunner(loss_name="nope")
