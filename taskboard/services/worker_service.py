"""Worker service"""

import logging
from typing import List

from taskboard.errors import NotFoundError
from taskboard.models import Worker
from taskboard.repositories import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Policy layer above the worker repository"""

    def __init__(self, repository: WorkerRepository):
        self.repository = repository

    def find_by_id(self, worker_id: int) -> Worker:
        worker = self.repository.find_by_id(worker_id)
        if worker is None:
            logger.warning(f"Worker {worker_id} not found")
            raise NotFoundError.for_entity("Worker", worker_id)
        return worker

    def find_all(self) -> List[Worker]:
        return self.repository.find_all()

    def save(self, worker: Worker) -> Worker:
        return self.repository.save(worker)

    def update_by_id(self, worker_id: int, worker: Worker) -> Worker:
        worker.id = worker_id
        return self.repository.update(worker)

    def delete_by_id(self, worker_id: int) -> None:
        self.find_by_id(worker_id)
        self.repository.delete_by_id(worker_id)
