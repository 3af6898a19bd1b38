"""
Запуск через python -m src.harness
"""

import sys

from src.harness.cli import main

sys.exit(main())
