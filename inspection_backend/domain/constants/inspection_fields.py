class InspectionFields:
    """MongoDB field names for inspections collection"""

    # inspection_number is the natural key and is stored as _id
    MONGO_ID = "_id"

    TRANSFORMER_NUMBER = "transformer_number"
    INSPECTION_DATE = "inspection_date"
    INSPECTION_TIME = "inspection_time"
    BRANCH = "branch"
    STATUS = "status"
    IMAGE_URL = "inspection_image_url"
