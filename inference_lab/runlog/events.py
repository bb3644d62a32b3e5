"""
This module builds a run manifest and serializes algorithm event logs as
canonical JSONL. Canonical means sorted keys and fixed separators, so two runs
with the same seed and configuration produce byte-identical files. The
manifest hash is the SHA-256 of the canonicalized manifest without the hash.
"""

from __future__ import annotations
import json
import hashlib
import platform
import sys
from typing import Dict, Iterable, List

import numpy as np
import scipy

from inference_lab.search.config import LogEvent


class RunLog:
	@staticmethod
	def canonical_json(o: dict) -> str:
		"""
		Return a canonical JSON string with sorted keys and fixed separators.
		"""
		return json.dumps(o, sort_keys=True, ensure_ascii=False, separators=(",", ":"))

	@staticmethod
	def sha256_hex(b: bytes) -> str:
		h = hashlib.sha256()
		h.update(b)
		return h.hexdigest()

	@staticmethod
	def env_block() -> Dict[str, str]:
		"""
		Return a stable environment descriptor with fixed keys and string values.
		"""
		return {
			"python_version": ".".join(str(x) for x in sys.version_info[:3]),
			"numpy_version": np.__version__,
			"scipy_version": scipy.__version__,
			"system": platform.system(),
			"machine": platform.machine(),
			"python_impl": platform.python_implementation(),
		}

	@staticmethod
	def build_manifest(run_id: str, seed: int, settings: Dict[str, object]) -> Dict[str, object]:
		"""
		Build a run manifest dict with a stable manifest hash.
		"""
		core: Dict[str, object] = {
			"run_id": str(run_id),
			"seed": int(seed),
			"settings": dict(settings),
			"env": RunLog.env_block(),
		}
		digest = RunLog.sha256_hex(RunLog.canonical_json(core).encode("utf-8"))
		out = dict(core)
		out["manifest_hash"] = digest
		return out

	@staticmethod
	def event_records(source: str, events: Iterable[LogEvent]) -> List[Dict[str, object]]:
		"""
		Flatten LogEvents into dicts with a per-source logical clock `t`.
		"""
		out: List[Dict[str, object]] = []
		t = 0
		for ev in events:
			rec: Dict[str, object] = {"source": str(source), "t": t, "kind": ev.kind}
			rec.update(ev.payload)
			out.append(rec)
			t += 1
		return out

	@staticmethod
	def to_jsonl(records: Iterable[Dict[str, object]]) -> str:
		lines = [RunLog.canonical_json(r) for r in records]
		if not lines:
			return ""
		return "\n".join(lines) + "\n"
