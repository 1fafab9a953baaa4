import asyncio

from slimargs import ArgParser
from slimargs.utils import setup_logging

setup_logging()

parser = ArgParser(package_file=__file__)
parser.add_command("test1", shortcut="s", description="Special test string", default="SpecialVal")
parser.add_command("hello", shortcut="n", description="Special test number", default=10)
parser.add_command("test3", shortcut="b", description="Special test boolean", default=True)

# Entry point
if __name__ == "__main__":
    print(parser.parse())
    asyncio.run(parser.help())
