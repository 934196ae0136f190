"""Allows running the service with ``python -m rollout_target``."""

from rollout_target.main import run

if __name__ == "__main__":
    run()
