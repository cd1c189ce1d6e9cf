#!/usr/bin/env python3
"""
Sandbox entrypoint for code-review-agent.
Reads review parameters from stdin JSON, reviews the project, outputs JSON to stdout.

Input (stdin JSON):
{
  "path": ".",                         // project root (alias: "directory")
  "roots": ["server/src", "client/src"],  // optional, relative to path
  "extensions": [".js", ".ts"],        // optional
  "exclude_dirs": ["node_modules"],    // optional
  "max_workers": 4                     // optional
}

Single snippet input:
{
  "code": "var x = 1",
  "file_name": "snippet.js"            // optional
}
"""

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from code_review_agent.collector import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS
from code_review_agent.config import DEFAULT_ROOTS
from code_review_agent.pipeline import review_text, run_review

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _string_list(input_data: dict, key: str, default) -> list[str]:
    value = input_data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{key}' must be a list of strings")
    return value


def _run(input_data: dict) -> dict:
    code = input_data.get("code")
    if isinstance(code, str):
        file_name = input_data.get("file_name") or "snippet.js"
        return review_text(code, file_name).model_dump(mode="json")

    local_path = input_data.get("path") or input_data.get("directory")
    if not local_path:
        raise ValueError(
            "Missing required input. Provide 'path'/'directory' (local path) or 'code' (string)."
        )

    project_root = Path(local_path).resolve()
    if not project_root.exists():
        raise ValueError(f"Path does not exist: {local_path}")
    if not project_root.is_dir():
        raise ValueError(f"Path is not a directory: {local_path}")

    roots = _string_list(input_data, "roots", DEFAULT_ROOTS)
    extensions = _string_list(input_data, "extensions", sorted(DEFAULT_EXTENSIONS))
    exclude_dirs = _string_list(input_data, "exclude_dirs", sorted(DEFAULT_EXCLUDED_DIRS))

    max_workers = input_data.get("max_workers", 1)
    if not isinstance(max_workers, int) or max_workers < 1:
        raise ValueError("'max_workers' must be a positive integer")

    report = run_review(
        [project_root / root for root in roots],
        extensions,
        exclude_dirs,
        base_path=project_root,
        max_workers=max_workers,
    )
    return report.model_dump(mode="json")


def main() -> None:
    try:
        input_data = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON input: {e}"}))
        sys.exit(1)

    if not isinstance(input_data, dict):
        print(json.dumps({"error": "Input must be a JSON object"}))
        sys.exit(1)

    try:
        result = _run(input_data)
        print(json.dumps(result, ensure_ascii=False))
    except ValueError as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Review failed: {e}")
        print(json.dumps({"error": f"Review failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
