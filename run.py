#!/usr/bin/env python3
"""A development server launcher for the rollout target service.

Usage:
    BEHAVIOR=chaotic VERSION=2.0 python run.py

This script prints the endpoints of the local instance and starts it with
the same settings the container would use.
"""

import sys
from pathlib import Path

# Ensure project root is in sys.path for direct script execution
project_root = Path(__file__).parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def print_startup_info(settings):
    """Prints a formatted banner with useful development information."""
    host_display = "localhost" if settings.server.host == "0.0.0.0" else settings.server.host
    base_url = f"http://{host_display}:{settings.port}"

    print("Rollout Target Service")
    print("=" * 50)
    print(f"Version:   {settings.service.version}")
    print(f"Behavior:  {settings.service.behavior.value}")
    print(f"Hostname:  {settings.service.hostname}")
    print(f"Log Level: {settings.log_level}")
    print()
    print("Available Endpoints:")
    print(f"  Envelope:     {base_url}/")
    print(f"  Health Check: {base_url}/health")
    print(f"  Data:         {base_url}/api/data")
    print(f"  Process:      {base_url}/api/process")
    print(f"  Metrics:      {base_url}/metrics")
    print("=" * 50)


if __name__ == "__main__":
    from rollout_target.core.config import get_settings
    from rollout_target.main import serve
    from rollout_target.utils.exceptions import ConfigurationError

    try:
        settings = get_settings()
        print_startup_info(settings)
        serve(settings)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    except ConfigurationError as e:
        print(f"Error starting server: {e} {e.context or ''}")
        sys.exit(1)
