import sys
from pathlib import Path

HERE = Path(__file__).resolve().parent  # scripts/
sys.path.insert(0, str(HERE))           # make 'assets_process' importable

from assets_process.main import main

if __name__ == "__main__":
    raise SystemExit(main())
