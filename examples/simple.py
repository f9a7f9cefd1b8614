"""simple.py"""
from clparse import CommandLineParser, Option
from clparse.utils import setup_logging

setup_logging()

output = Option.with_default("-o", "--output", "File the report is written to", "report.txt")
name = Option("-n", "--name", "Name to greet", required=True)
tags = Option("-t", "--tags", "Comma separated list of tags")
verbose = Option.flag("-V", "--verbose", "Print every step")

parser = CommandLineParser(
    program_name="simple", program_version="1.0.0", help_option=True, version_option=True
)
parser.add_option(name)
parser.add_option(output)
parser.add_separator()
parser.add_option(tags)
parser.add_option(verbose)

if __name__ == "__main__":
    parser.parse()

    print(f"Hello {parser.get_value(name)}!")
    print(f"Writing to {parser.get_value(output)}")
    if parser.is_set(tags):
        print("Tags:", ", ".join(parser.get_value_list(tags)))
    if parser.is_set(verbose):
        print("Verbose mode on")
