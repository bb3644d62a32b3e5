"""
Search Runner: drive gradient descent, simulated annealing and Monte Carlo
search from one start point, print a comparison table and write run artifacts.
"""

from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from inference_lab.landscape import PRESET_LOSSES
from inference_lab.random_source import RandomSource
from inference_lab.runlog import RunLog
from inference_lab.search import (
	AnnealingConfig, GradientDescent, GradientDescentConfig, MethodComparison,
	MethodResult, MonteCarloConfig, MonteCarloSearch, SearchAlgorithm, SimulatedAnnealing,
)


class SearchRunner:
	"""
	Runs the three algorithms on a named loss. Stochastic algorithms get
	their own PCG64 generators seeded at seed + 1 and seed + 2.
	"""

	LABELS = {
		"gradient_descent": "Gradient Descent",
		"simulated_annealing": "Simulated Annealing",
		"monte_carlo": "Monte Carlo",
	}

	def __init__(self,
				 loss_name: str = "loss_with_trap",
				 seed: int = 20240601,
				 gd: Optional[GradientDescentConfig] = None,
				 sa: Optional[AnnealingConfig] = None,
				 mc: Optional[MonteCarloConfig] = None) -> None:
		if loss_name not in PRESET_LOSSES:
			raise ValueError(f"unknown loss '{loss_name}', expected one of {sorted(PRESET_LOSSES)}")
		self.loss_name = loss_name
		self.seed = int(seed)
		self.gd_cfg = gd if gd is not None else GradientDescentConfig()
		self.sa_cfg = sa if sa is not None else AnnealingConfig()
		self.mc_cfg = mc if mc is not None else MonteCarloConfig()

	def build(self) -> List[SearchAlgorithm]:
		loss_fn = PRESET_LOSSES[self.loss_name]
		sa_rng = RandomSource.generator(seed=self.seed + 1)
		mc_rng = RandomSource.generator(seed=self.seed + 2)
		return [
			GradientDescent(self.gd_cfg, loss_fn=loss_fn),
			SimulatedAnnealing(self.sa_cfg, loss_fn=loss_fn, rng=sa_rng),
			MonteCarloSearch(self.mc_cfg, loss_fn=loss_fn, rng=mc_rng),
		]

	def run(self, hot: float, cold: float) -> List[SearchAlgorithm]:
		algos = self.build()
		for a in algos:
			a.start(hot, cold)
			n = a.run_to_completion()
			print(f"[search] {a.name}: {n} calls, {a.step_count} steps")
		return algos

	@staticmethod
	def results(algos: List[SearchAlgorithm]) -> List[MethodResult]:
		return [MethodComparison.summarize(SearchRunner.LABELS.get(a.name, a.name), a) for a in algos]

	def settings(self, hot: float, cold: float) -> Dict[str, object]:
		return {
			"loss": self.loss_name,
			"start": [float(hot), float(cold)],
			"gradient_descent": dict(vars(self.gd_cfg)),
			"simulated_annealing": dict(vars(self.sa_cfg)),
			"monte_carlo": dict(vars(self.mc_cfg)),
		}

	def write_artifacts(self, out_dir: Path, hot: float, cold: float, algos: List[SearchAlgorithm], table: pd.DataFrame) -> None:
		"""
		Write manifest.json, summary.json and events.jsonl into out_dir.
		"""
		out_dir.mkdir(parents=True, exist_ok=True)
		man = RunLog.build_manifest(f"search_{self.seed}", self.seed, self.settings(hot, cold))
		(out_dir / "manifest.json").write_text(RunLog.canonical_json(man), encoding="utf-8")
		summary = json.loads(table.to_json(orient="records"))
		(out_dir / "summary.json").write_text(json.dumps(summary, sort_keys=True, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")
		records: List[Dict[str, object]] = []
		for a in algos:
			records.extend(RunLog.event_records(a.name, a.events))
		(out_dir / "events.jsonl").write_text(RunLog.to_jsonl(records), encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> None:
	"""
	CLI entry point for the search runner.
	"""
	p = argparse.ArgumentParser(description="Compare gradient descent, simulated annealing and Monte Carlo search")
	p.add_argument("--hot", type=float, default=0.15)
	p.add_argument("--cold", type=float, default=0.6)
	p.add_argument("--loss", type=str, default="loss_with_trap", choices=sorted(PRESET_LOSSES))
	p.add_argument("--lr", type=float, default=0.05)
	p.add_argument("--gd-steps", type=int, default=500)
	p.add_argument("--sa-steps", type=int, default=800)
	p.add_argument("--mc-samples", type=int, default=500)
	p.add_argument("--seed", type=int, default=20240601)
	p.add_argument("--out", type=str, default="")
	args = p.parse_args(argv)
	runner = SearchRunner(
		loss_name=args.loss,
		seed=int(args.seed),
		gd=GradientDescentConfig(learning_rate=float(args.lr), max_steps=int(args.gd_steps)),
		sa=AnnealingConfig(max_steps=int(args.sa_steps)),
		mc=MonteCarloConfig(max_samples=int(args.mc_samples)),
	)
	algos = runner.run(float(args.hot), float(args.cold))
	table = MethodComparison.table(SearchRunner.results(algos))
	print(table.to_string(index=False))
	if args.out:
		out_dir = Path(args.out).resolve()
		runner.write_artifacts(out_dir, float(args.hot), float(args.cold), algos, table)
		print(f"[search] Artifacts written to {out_dir}")


if __name__ == "__main__":
	main()
