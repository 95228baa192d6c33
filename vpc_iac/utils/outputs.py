"""
Write resolved stack outputs to a dotenv-style file for local tooling.
"""

from pathlib import Path
from typing import Any

import pulumi


def _format_value(value: Any) -> str:
    if isinstance(value, dict):
        return ",".join(f"{key}={value[key]}" for key in sorted(value))
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_env_lines(values: dict[str, Any]) -> list[str]:
    """Render resolved outputs as sorted KEY=value lines."""
    return [f"{key.upper()}={_format_value(values[key])}" for key in sorted(values)]


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    path: str | Path,
) -> pulumi.Output[str | None]:
    """
    Write stack outputs to an env file once they resolve.

    Nothing is written during preview since most values are still unknown.

    Args:
        outputs: Output name to value mapping (plain values or Outputs)
        path: Destination file

    Returns:
        Output resolving to the written path, or None during preview
    """
    destination = Path(path)

    def _write(values: dict[str, Any]) -> str | None:
        if pulumi.runtime.is_dry_run():
            return None
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text("\n".join(format_env_lines(values)) + "\n")
        pulumi.log.info(f"Wrote {len(values)} stack outputs to {destination}")
        return str(destination)

    return pulumi.Output.all(**outputs).apply(_write)
