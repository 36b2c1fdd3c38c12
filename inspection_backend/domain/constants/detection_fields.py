"""Constants for Detection model field names"""


class DetectionFields:
    """MongoDB field names for inspection_detections collection"""

    MONGO_ID = "_id"

    INSPECTION_NUMBER = "inspection_number"

    WIDTH = "width"
    HEIGHT = "height"
    X = "x"
    Y = "y"
    CONFIDENCE = "confidence"

    CLASS_ID = "class_id"
    CLASS_NAME = "class_name"

    DETECTION_ID = "detection_id"
    PARENT_ID = "parent_id"
