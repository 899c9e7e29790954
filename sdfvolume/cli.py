"""Command line entry point: build a volume, preview it, export raw bytes."""

from __future__ import annotations

import os
import subprocess
import sys
import time

from .sdflib import repeating_transform_sdf
from .volume import Volume

__all__ = ["main"]

VOLUME_SIZE = 256
ANIMATION_MS = 3000


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def main(argv=None) -> int:
    """Write the rendered volume to the file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sdfvolume"
        print(f"Usage: {prog} <output_file>", file=sys.stderr)
        return 1
    output_path = args[0]

    volume = Volume(VOLUME_SIZE)
    volume.set_sdf(repeating_transform_sdf)
    final = -(volume.minimum(0))

    out = sys.stdout
    out.write(str(final))

    delay = (ANIMATION_MS // final.size) / 1000.0
    for depth in range(final.size):
        final.write_slice(out, depth)
        out.flush()
        time.sleep(delay)
        _clear_screen()

    with open(output_path, "wb") as handle:
        final.write_binary(handle)
    return 0


if __name__ == "__main__":
    sys.exit(main())