import os
from typing import Dict

import yaml

from hiveddl.observability.logger import log_event
from hiveddl.router import route
from hiveddl.utils.exceptions import ConfigurationError


class ConfigExecutor:
    """
    Generates Hive DDL for one table described by a YAML configuration
    and writes the statements as an .hql script.
    """

    def __init__(self, config_path: str, output_dir: str = None):
        self.config_path = config_path
        self.config = self._load_config()
        self.output_dir = output_dir or self.config.get("output_dir", "outputs")

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"Config must be a mapping: {self.config_path}")
        return config

    # ------------------------------------------
    # Build Router Payload
    # ------------------------------------------
    def _build_payload(self) -> Dict:
        cfg = self.config

        if not cfg.get("input_table"):
            raise ConfigurationError("input_table is required")

        return {
            "input_table": cfg.get("input_table"),
            "output_table": cfg.get("output_table"),
            "columns": cfg.get("columns", []),
            "options": cfg.get("options", {}),
            "with_comments": cfg.get("with_comments", False),
            # Script files need terminated statements
            "terminate_statements": True,
        }

    # ------------------------------------------
    # Execute Pipeline
    # ------------------------------------------
    def execute(self) -> Dict:
        payload = self._build_payload()
        result = route(payload)
        result["script_path"] = self._save_outputs(result)
        return result

    # ------------------------------------------
    # Save Outputs
    # ------------------------------------------
    def _save_outputs(self, result: Dict) -> str:
        os.makedirs(self.output_dir, exist_ok=True)

        path = os.path.join(self.output_dir, f"{result['output_table']}.hql")
        with open(path, "w", encoding="utf-8") as f:
            f.write(result["create_table"])
            f.write("\n\n")
            f.write(result["load_data"])
            f.write("\n")

        log_event("TABLE_DDL_SCRIPT_WRITTEN", {
            "output_table": result["output_table"],
            "path": path,
        })
        return path
