class TimelineFields:
    """MongoDB field names for inspection_timeline collection"""

    MONGO_ID = "_id"

    DETECTION_ID = "detection_id"
    INSPECTION_NUMBER = "inspection_number"

    TYPE = "type"
    AUTHOR = "author"
    COMMENT = "comment"
    CREATED_AT = "created_at"
