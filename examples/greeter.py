import sys

from optbuilder import OptionParser, OptbuilderError
from optbuilder.utils import setup_logging

setup_logging(log_filename=None)

parser = OptionParser(name="greeter", footer="Greets the audience, or the world.")
parser.add_option("-h", "--help", help="display usage")
parser.add_option("-a", "--audience", arg_name="name", help="greeting audience")
parser.add_option("-n", "--times", type=int, default="1", help="how many greetings")
parser.add_option("-s", "--shout", help="greet in upper case")

try:
    result = parser.parse()
except OptbuilderError as error:
    print(f"greeter: {error}", file=sys.stderr)
    parser.print_usage(sys.stderr)
    sys.exit(2)

if result.help:
    parser.print_usage()
    sys.exit(0)

greeting = f"Hello {result.audience or 'World'}!"
if result.shout:
    greeting = greeting.upper()
for _ in range(result.times):
    print(greeting)
