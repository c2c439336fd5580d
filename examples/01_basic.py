"""
Basic usage - List tasks and clear finished ones
"""
import asyncio
from synods import DownloadStation


async def main():
    # Reads SYNOLOGY_HOST, SYNOLOGY_USERNAME and SYNOLOGY_PASSWORD
    async with DownloadStation.from_env() as ds:

        tasks = await ds.list_tasks()
        for task in tasks.task:
            print(f"task: {task.id}, title: {task.title}, status: {task.status.name}")

        await ds.clear_completed()
        print("Finished tasks cleared")


if __name__ == "__main__":
    asyncio.run(main())
