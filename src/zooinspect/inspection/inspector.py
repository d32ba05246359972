"""ZooInspector facade."""

from __future__ import annotations

from zooinspect.inspection.ports import ImageRecognitionSystem, InspectionLog, Zoo
from zooinspect.inspection.runner import run_inspection


class ZooInspector:
    """Runs one inspection per call and hands its lines to the inspection log.

    Example:
        inspector = ZooInspector(recognition, RecordingInspectionLog())
        inspector.inspect(zoo)
    """

    def __init__(
        self,
        image_recognition_system: ImageRecognitionSystem,
        inspection_log: InspectionLog,
    ) -> None:
        self.image_recognition_system = image_recognition_system
        self.inspection_log = inspection_log

    def inspect(self, zoo: Zoo) -> None:
        """Inspect a zoo. Collaborator errors propagate and nothing is logged."""
        result = run_inspection(zoo, self.image_recognition_system)
        self.inspection_log.log(result.lines)
