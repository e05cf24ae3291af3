"""config_loading.py"""
import sys

from cmdkit.cli import run_cli
from cmdkit.config import loader

manager = loader("cmdkit.yaml")

if __name__ == "__main__":
    sys.exit(run_cli(manager))
