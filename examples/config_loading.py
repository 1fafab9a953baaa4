"""config_loading.py"""

from slimargs.config import loader

parser = loader("commands.yaml")

if __name__ == "__main__":
    import asyncio

    print(parser.parse())
    asyncio.run(parser.help())
