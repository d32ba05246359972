"""zooinspect Inspection Package.

Walks a zoo's enclosures, asks an image recognition system whether each
enclosure is safe and each animal healthy, dispatches help on failure, and
hands the resulting status lines to an inspection log.

Usage:
    from zooinspect.inspection import ZooInspector, RecordingInspectionLog

    log = RecordingInspectionLog()
    ZooInspector(recognition, log).inspect(zoo)
    print(log.last)  # ["ANIMAL#Leo#WARNING", "ZOO#Z1#WARNING"]
"""

from zooinspect.inspection.inspector import ZooInspector
from zooinspect.inspection.logs import (
    LoggerInspectionLog,
    MultiInspectionLog,
    RecordingInspectionLog,
)
from zooinspect.inspection.runner import (
    InspectionResult,
    check_animal,
    check_enclosure,
    run_inspection,
)
from zooinspect.inspection.status import (
    StatusLine,
    SubjectKind,
    Verdict,
    parse_status_line,
)

__all__ = [
    # Main entry point
    "ZooInspector",
    "run_inspection",
    "check_enclosure",
    "check_animal",
    "InspectionResult",
    # Inspection logs
    "RecordingInspectionLog",
    "LoggerInspectionLog",
    "MultiInspectionLog",
    # Status lines
    "StatusLine",
    "SubjectKind",
    "Verdict",
    "parse_status_line",
]
