"""Entry point for ``python -m create_kii_dapp``."""

import sys


def _run() -> int:
    try:
        from create_kii_dapp.pipeline import main
    except ImportError as exc:
        print(
            f"create-kii-dapp could not import a required module ({exc.name or exc}). "
            "Reinstall it with: pip install create-kii-dapp",
            file=sys.stderr,
        )
        return 1
    return main()


if __name__ == "__main__":
    sys.exit(_run())
