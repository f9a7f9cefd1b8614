"""config_loading.py"""
from pathlib import Path

from clparse.config import loader

parser = loader(Path(__file__).parent / "clparse.yaml")

if __name__ == "__main__":
    parser.parse()
    for option in parser:
        if option.is_set() and not option.separator:
            print(f"{option.args_text}: {option.get_value()}")
