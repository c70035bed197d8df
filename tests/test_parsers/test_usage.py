from io import StringIO
from pathlib import Path

import pytest

from optbuilder.exceptions import UsageTemplateError
from optbuilder.parser import OptionParser, UsageMessage


def test_usage_sections():
    """Headings and text sections surround the synopsis and the option table."""
    message = UsageMessage(
        header_heading="Header heading:%n",
        header=["Header 1", "Header 2"],
        synopsis_heading="%nUsage: ",
        description_heading="%nDescription heading:%n",
        description=["Description 1", "Description 2"],
        option_list_heading="%nOptions heading:%n",
        footer_heading="%nFooter heading:%n",
        footer=["Footer 1", "Footer 2"],
    )
    parser = OptionParser(name="myapp", usage_message=message)
    parser.add_option("-a", help="option a description")
    parser.add_option("-b", help="option b description")
    parser.add_option("-c", arity="*", help="option c description")

    assert parser.get_usage() == (
        "Header heading:\n"
        "Header 1\n"
        "Header 2\n"
        "\n"
        "Usage: myapp [-ab] [-c[=PARAM...]]...\n"
        "\n"
        "Description heading:\n"
        "Description 1\n"
        "Description 2\n"
        "\n"
        "Options heading:\n"
        "  -a               option a description\n"
        "  -b               option b description\n"
        "  -c= [PARAM...]   option c description\n"
        "\n"
        "Footer heading:\n"
        "Footer 1\n"
        "Footer 2\n"
    )


def test_usage_single_hyphen_long():
    """Long names render with one hyphen and wide entries wrap below."""
    parser = OptionParser(
        name="ant",
        usage="ant [options] [targets]",
        description="Options:",
        accept_single_hyphen_long=True,
    )
    parser.add_option("-help", help="print this message")
    parser.add_option("-logfile", type=Path, arg_name="file", help="use given file for log")
    parser.add_option(
        "-D", type=dict, arg_name="property=value", help="use value for given property"
    )
    parser.add_option(
        "-lib",
        arg_name="path",
        value_separator=",",
        arity=3,
        help="comma-separated list of 3 paths to search for jars and classes",
    )

    assert parser.get_usage() == (
        "Usage: ant [options] [targets]\n"
        "Options:\n"
        "  -D= <property=value>   use value for given property\n"
        "      -help              print this message\n"
        "      -lib=<path>,<path>,<path>\n"
        "                         comma-separated list of 3 paths to search for jars and\n"
        "                           classes\n"
        "      -logfile=<file>    use given file for log\n"
    )

    result = parser.parse(
        ["-logfile", "build.log", "-Dkey=value", "-lib", "a,b,c", "target"]
    )
    assert result.value("logfile") == Path("build.log")
    assert result.value("D") == {"key": "value"}
    assert result.values("lib") == ["a", "b", "c"]
    assert result.arguments() == ["target"]


def build_curl_parser(**kwargs) -> OptionParser:
    parser = OptionParser(name="curl", **kwargs)
    parser.add_option("--basic", help="Use HTTP Basic Authentication")
    parser.add_option("-d", "--data", arity=1, arg_name="data", help="HTTP POST data")
    parser.add_option("-G", "--get", help="Send the -d data with a HTTP GET")
    parser.add_option("-q", help="If used as the first parameter disables .curlrc")
    parser.add_option("--url", arg_name="URL", help="Set URL to work with")
    return parser


CURL_USAGE = (
    "Usage: curl [-Gq] [--basic] [--url=<URL>] [-d=<data>]\n"
    "      --basic         Use HTTP Basic Authentication\n"
    "  -d, --data=<data>   HTTP POST data\n"
    "  -G, --get           Send the -d data with a HTTP GET\n"
    "  -q                  If used as the first parameter disables .curlrc\n"
    "      --url=<URL>     Set URL to work with\n"
)


def test_usage_short_and_long_names():
    parser = build_curl_parser(sort_options=False)

    assert parser.get_usage() == CURL_USAGE


def test_print_usage():
    parser = build_curl_parser(sort_options=False)
    buffer = StringIO()

    parser.print_usage(buffer)
    assert buffer.getvalue() == CURL_USAGE


def test_usage_sorting():
    parser = OptionParser(name="tool")
    parser.add_option("-z", help="zulu")
    parser.add_option("-a", help="alpha")
    parser.add_option("-M", help="mike")

    assert parser.get_usage() == (
        "Usage: tool [-aMz]\n"
        "  -a     alpha\n"
        "  -M     mike\n"
        "  -z     zulu\n"
    )

    parser.usage_message.sort_options = False
    assert parser.get_usage().splitlines()[0] == "Usage: tool [-zaM]"


def test_usage_param_text():
    parser = OptionParser(name="tool", sort_options=False)
    parser.add_option("--level", type=int, optional_arg=True, help="level")
    parser.add_option("-k", arity="+", value_separator=",", arg_name="key", help="keys")
    parser.add_option("-f", "--files", arity="+", help="files")
    parser.add_option("-p", arity=2, help="pair")

    assert parser.get_usage() == (
        "Usage: tool [--level[=PARAM]] [-k=<key>[,<key>...]]... [-f=PARAM...]... "
        "[-p=PARAM PARAM]\n"
        "      --level[=PARAM]    level\n"
        "  -k= <key>[,<key>...]   keys\n"
        "  -f, --files=PARAM...   files\n"
        "  -p= PARAM PARAM        pair\n"
    )


def test_usage_wraps_descriptions():
    parser = OptionParser(name="tool", width=40)
    parser.add_option(
        "-v", "--verbose", help="print every step of the build as it runs"
    )

    assert parser.get_usage() == (
        "Usage: tool [-v]\n"
        "  -v, --verbose   print every step of\n"
        "                    the build as it runs\n"
    )


def test_usage_placeholders():
    parser = OptionParser(
        name="tool",
        header="Run {name} --help for details",
        footer=["Width: {width}", "Braces: {{}}"],
    )

    assert parser.get_usage() == (
        "Run tool --help for details\n"
        "Usage: tool\n"
        "Width: 80\n"
        "Braces: {}\n"
    )


def test_usage_template_error():
    parser = OptionParser(name="tool", header=["Hello {user}"])

    with pytest.raises(UsageTemplateError):
        parser.get_usage()

    parser = OptionParser(name="tool", usage="tool {0}")
    with pytest.raises(UsageTemplateError):
        parser.get_usage()


def test_usage_does_not_freeze():
    parser = OptionParser(name="tool")
    parser.add_option("-a", help="a")
    parser.get_usage()

    parser.add_option("-b", help="b")
    assert parser.get_usage().splitlines()[0] == "Usage: tool [-ab]"
