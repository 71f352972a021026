from pydantic import BaseModel, ConfigDict


class TodoItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    completed: bool = False

    def toggled(self) -> "TodoItem":
        return self.model_copy(update={"completed": not self.completed})
