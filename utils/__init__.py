from utils.sanitize import sanitize_filename, is_safe_filename
from utils.timestamps import current_millis, fallback_name, fallback_to_datetime
