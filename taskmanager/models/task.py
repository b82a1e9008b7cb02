"""Task model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from taskmanager.core.database import Base, utcnow


class ProjectTask(Base):
    __tablename__ = "project_tasks"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True, index=True)

    is_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    project = relationship("Project", back_populates="tasks")

    def mark_completed(self):
        self.is_completed = True
        self.completed_at = utcnow()

    def mark_incomplete(self):
        self.is_completed = False
        self.completed_at = None

    def toggle(self):
        if self.is_completed:
            self.mark_incomplete()
        else:
            self.mark_completed()
