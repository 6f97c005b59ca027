from dataclasses import dataclass


@dataclass
class Task:
    """Task record held by the in-memory store"""
    id: int
    title: str = ""
    completed: bool = False

    def to_dict(self) -> dict:
        """Convert task to dictionary"""
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
        }

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
