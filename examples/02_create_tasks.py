"""
Creating tasks - From a URL, a magnet link and a torrent file
"""
import asyncio
import sys
from synods import DownloadStation, SynoAPIError


async def main(torrent_path=None):
    async with DownloadStation.from_env() as ds:

        created = await ds.create_task("https://example.com/ubuntu.iso", "downloads")
        print(f"Created: {created.task_id}")

        magnet = "magnet:?xt=urn:btih:0123456789abcdef&dn=example"
        await ds.create_task(magnet, "downloads")

        if torrent_path:
            try:
                created = await ds.create_task_from_path(torrent_path, "downloads")
                print(f"Created from file: {created.task_id}")
            except SynoAPIError as e:
                print(f"Upload refused ({e.code}): {e.message}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
