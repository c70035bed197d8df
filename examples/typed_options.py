from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path

from optbuilder import OptionParser, UsageMessage


class TimeUnit(Enum):
    """Units accepted as keys of the --timeout map."""

    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"


message = UsageMessage(
    header_heading="Deploys a build to a set of hosts.%n",
    synopsis_heading="%nUsage: ",
    option_list_heading="%nOptions:%n",
    footer_heading="%nExamples:%n",
    footer=["  {name} -v --hosts a,b,c --timeout SECONDS=30 build.tar"],
)
parser = OptionParser(name="deploy", usage_message=message)
parser.add_option("-v", "--verbose", help="print every step")
parser.add_option(
    "-H",
    "--hosts",
    type=list[str],
    arity="+",
    value_separator=",",
    arg_name="host",
    help="hosts to deploy to",
)
parser.add_option("-p", "--port", type=int, default="22", help="SSH port")
parser.add_option("--budget", type=Decimal, help="maximum spend for the rollout")
parser.add_option("--at", type=datetime, arg_name="when", help="schedule the rollout")
parser.add_option("--log", type=Path, arg_name="file", help="write the rollout log")
parser.add_option(
    "--timeout",
    type=dict[TimeUnit, int],
    arg_name="unit=n",
    help="per-unit timeouts, may be repeated",
)
parser.add_option("-D", arity=2, value_separator="=", arg_name="key", help="set a property")

if __name__ == "__main__":
    parser.print_usage()
    result = parser.parse(
        [
            "-v",
            "--hosts",
            "web1,web2",
            "db1",
            "--timeout",
            "SECONDS=30",
            "--timeout=HOURS=2",
            "--at",
            "2025-06-01 12:00",
            "-Denv=prod",
            "build.tar",
        ]
    )
    print()
    for name, value in result.as_dict().items():
        print(f"{name:>8}: {value!r}")
    print(f"    args: {result.arguments()!r}")
