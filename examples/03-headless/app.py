import asyncio
from tododesk.bridge import HostBridge
from tododesk.channel import ThreadChannel
from tododesk.store import SqliteTodoStore, RemoteTodoStore


async def main():
    store = RemoteTodoStore(ThreadChannel(HostBridge(SqliteTodoStore(":memory:"))))
    await store.add("buy milk")
    await store.add("walk the dog")
    await store.toggle(1)
    for todo in await store.list():
        print(f"[{'x' if todo.completed else ' '}] {todo.id}: {todo.text}")
    await store.close()


if __name__ == "__main__":
    asyncio.run(main())
