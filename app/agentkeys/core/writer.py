"""Agent configuration writer.

Regenerates the full agent configuration from a selection store.
Selected records are written as plain blocks, the rest commented out.
The file is rewritten as a whole, so content that was not read as a
record is not preserved.
"""

import logging
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile

from agentkeys.core.errors import AgentConfigWriteError
from agentkeys.core.store import SelectionStore

logger = logging.getLogger(__name__)


def serialize_agent_config(store: SelectionStore) -> str:
    """Render the store as agent configuration text.

    Args:
        store: Records and their selection.

    Returns:
        Configuration text, one block per record in order.
    """
    return "".join(record.encode(active) for record, active in store.entries())


def save_agent_config(store: SelectionStore, path: Path) -> Path:
    """Write the store to the agent configuration file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.
    Lines end in LF on every platform and an existing file keeps its
    permission bits. The temporary file is cleaned up on failure.

    Args:
        store: Records and their selection.
        path: Path to agent.toml.

    Returns:
        Path where the configuration was saved.

    Raises:
        AgentConfigWriteError: If the file cannot be written.
    """
    content = serialize_agent_config(store)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise AgentConfigWriteError(f"Failed to write agent config: {e}") from e

    logger.info(
        "Saved %d ssh-keys record(s) (%d active) to %s",
        len(store),
        len(store.selected),
        path,
    )
    return path
