"""zooinspect - Zoo enclosure and animal inspection.

Usage:
    from zooinspect.inspection import ZooInspector

    inspector = ZooInspector(image_recognition_system, inspection_log)
    inspector.inspect(zoo)
"""

__version__ = "0.1.0"
