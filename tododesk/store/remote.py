import logging
from typing import List
from ..models import TodoItem
from ..bridge import CHANNELS
from .base import AsyncTodoStore


class RemoteTodoStore(AsyncTodoStore):
    """
    Store reached through a bridge channel. Keeps no cache: every list()
    is a fresh round trip to the host.
    """

    def __init__(self, channel):
        self.channel = channel
        self.logger = logging.getLogger("TodoDesk.Store")

    async def list(self) -> List[TodoItem]:
        rows = await self.channel.invoke(CHANNELS["list"])
        return [TodoItem(**row) for row in rows]

    async def add(self, text: str) -> TodoItem:
        result = await self.channel.invoke(CHANNELS["add"], text)
        return TodoItem(id=result["id"], text=text, completed=False)

    async def toggle(self, todo_id: int) -> None:
        await self.channel.invoke(CHANNELS["toggle"], todo_id)

    async def remove(self, todo_id: int) -> None:
        await self.channel.invoke(CHANNELS["remove"], todo_id)

    async def close(self) -> None:
        self.channel.close()
