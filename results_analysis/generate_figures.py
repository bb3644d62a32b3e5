"""
Generate the explorable's static figures.
Runs the search algorithms and the coin trial with fixed seeds.
Outputs figures to ./fig/ subdirectory.
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from inference_lab.landscape import (
	FLOW_ISO_VALUES, PRESET_LOSSES, compute_loss_grid, find_grid_minimum, flow_iso_segment,
)
from inference_lab.runners.run_search import SearchRunner
from inference_lab.search import compare_methods
from inference_lab.trials import PRIORS, CoinTrial, bayesian_update, frequentist_test


def set_style() -> None:
	sns.set_style("whitegrid")
	plt.rcParams['figure.dpi'] = 150
	plt.rcParams['savefig.dpi'] = 300
	plt.rcParams['font.size'] = 10
	plt.rcParams['axes.labelsize'] = 11
	plt.rcParams['axes.titlesize'] = 12
	plt.rcParams['legend.fontsize'] = 9


def landscape_figure(output_dir: Path, loss_name: str, seed: int, resolution: int) -> pd.DataFrame:
	"""Heatmap of log-loss with the three search paths overlaid."""
	grid = compute_loss_grid(resolution, PRESET_LOSSES[loss_name])
	runner = SearchRunner(loss_name=loss_name, seed=seed)
	algos = runner.run(0.15, 0.6)

	fig, ax = plt.subplots(figsize=(7, 6))
	im = ax.imshow(np.log(grid.as_matrix()), origin="lower", extent=(0, 1, 0, 1), cmap="viridis_r", aspect="auto")
	fig.colorbar(im, ax=ax, label="log loss")
	for f in FLOW_ISO_VALUES:
		seg = flow_iso_segment(f)
		if seg is not None:
			(h0, c0), (h1, c1) = seg
			ax.plot([h0, h1], [c0, c1], color="white", lw=0.8, ls="--", alpha=0.7)
	colors = {"gradient_descent": "#ef4444", "simulated_annealing": "#f59e0b", "monte_carlo": "#a855f7"}
	for a in algos:
		pts = np.array([(p.hot, p.cold) for p in a.trace])
		if a.name == "monte_carlo":
			ax.scatter(pts[:, 0], pts[:, 1], s=4, color=colors[a.name], alpha=0.5, label=SearchRunner.LABELS[a.name])
		else:
			ax.plot(pts[:, 0], pts[:, 1], color=colors[a.name], lw=1.2, label=SearchRunner.LABELS[a.name])
	gh, gc = find_grid_minimum(grid)
	ax.scatter([gh], [gc], marker="*", s=150, color="white", edgecolor="black", label="grid minimum", zorder=5)
	ax.set_xlabel("hot")
	ax.set_ylabel("cold")
	ax.set_title(f"Loss landscape ({loss_name})")
	ax.legend(loc="upper right")
	plt.tight_layout()
	plt.savefig(output_dir / f"landscape_{loss_name}.pdf", bbox_inches='tight')
	plt.close()
	return compare_methods(SearchRunner.results(algos))


def comparison_figure(output_dir: Path, table: pd.DataFrame) -> None:
	fig, ax = plt.subplots(figsize=(6, 4))
	sns.barplot(data=table, x="label", y="best_loss", hue="label", ax=ax, palette="deep", legend=False)
	ax.set_xlabel("")
	ax.set_ylabel("best loss")
	ax.set_title("Best loss found per method")
	plt.tight_layout()
	plt.savefig(output_dir / "method_comparison.pdf", bbox_inches='tight')
	plt.close()


def posterior_figure(output_dir: Path, seed: int, bias: float, flips: int) -> None:
	"""Prior vs. posterior for every preset after the same batch of flips."""
	trial = CoinTrial(true_bias=bias, seed=seed)
	trial.flip(flips)
	freq = frequentist_test(trial.heads, trial.total)
	fig, axes = plt.subplots(1, len(PRIORS), figsize=(4 * len(PRIORS), 3.5), sharey=False)
	for ax, (name, preset) in zip(axes, PRIORS.items()):
		res = bayesian_update(preset.params.alpha, preset.params.beta, trial.heads, trial.tails)
		prior = pd.DataFrame(res.prior_curve, columns=["x", "density"])
		post = pd.DataFrame(res.posterior_curve, columns=["x", "density"])
		ax.plot(prior["x"], prior["density"], color="#6366f1", label="prior")
		ax.plot(post["x"], post["density"], color="#f59e0b", label="posterior")
		lo, hi = res.credible_interval
		ax.axvspan(lo, hi, color="#f59e0b", alpha=0.15)
		clo, chi = freq.confidence_interval
		ax.axvspan(clo, chi, color="#10b981", alpha=0.1)
		ax.axvline(bias, color="black", lw=0.8, ls=":")
		ax.set_title(preset.label, fontsize=10)
		ax.set_xlabel("P(heads)")
	axes[0].legend()
	plt.suptitle(f"{trial.heads} heads / {trial.total} flips, p = {freq.p_value:.3g}")
	plt.tight_layout()
	plt.savefig(output_dir / "posteriors.pdf", bbox_inches='tight')
	plt.close()


def main() -> None:
	ap = argparse.ArgumentParser(description="Generate landscape, comparison and posterior figures.")
	ap.add_argument("--out", type=str, default="fig", help="Output directory (created if missing)")
	ap.add_argument("--seed", type=int, default=20240601)
	ap.add_argument("--resolution", type=int, default=120)
	ap.add_argument("--bias", type=float, default=0.6)
	ap.add_argument("--flips", type=int, default=40)
	args = ap.parse_args()

	set_style()
	output_dir = Path(args.out)
	output_dir.mkdir(parents=True, exist_ok=True)

	print("\nGenerating landscape figures...")
	table = landscape_figure(output_dir, "loss_with_trap", args.seed, args.resolution)
	landscape_figure(output_dir, "loss", args.seed, args.resolution)
	print(table.to_string(index=False))

	print("\nGenerating method comparison...")
	comparison_figure(output_dir, table)

	print("\nGenerating posterior panels...")
	posterior_figure(output_dir, args.seed, args.bias, args.flips)

	print(f"\nAll figures written to {output_dir}/")


if __name__ == "__main__":
	main()
