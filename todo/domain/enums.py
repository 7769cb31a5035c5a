from enum import Enum

class TaskStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"

    def __str__(self):
        return self.value
