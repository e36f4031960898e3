# Repository layout
DEFAULT_REPOSITORY_DIR = ".gvt"
CURRENT_VERSION = "current_version"
LAST_VERSION = "last_version"
VERSION_DETAILS = "version_details"
STAGING_PREFIX = ".staging-"

INITIAL_DETAILS = "GVT initialized."

# Default details written when the caller gives no message
DEFAULT_ADD_MESSAGE = "added {path}"
DEFAULT_DETACH_MESSAGE = "detached {path}"
DEFAULT_COMMIT_MESSAGE = "committed {path}"

# Result messages
MSG_INIT_SUCCESS = "Current directory initialized successfully."
MSG_ALREADY_INITIALIZED = "Current directory is already initialized."
MSG_NOT_INITIALIZED = "Current directory is not initialized. Please use init command to initialize."
MSG_ADD_SUCCESS = "File added successfully. File: {path}"
MSG_ALREADY_ADDED = "File already added. File: {path}"
MSG_FILE_NOT_FOUND = "File not found. File: {path}"
MSG_DETACH_SUCCESS = "File detached successfully. File: {path}"
MSG_NOT_ADDED = "File is not added to gvt. File: {path}"
MSG_COMMIT_SUCCESS = "File committed successfully. File: {path}"
MSG_CHECKOUT_SUCCESS = "Checkout successful for version: {version}"
MSG_INVALID_VERSION = "Invalid version number: {version}"
MSG_VERSION = "Version: {version}\n{details}"
MSG_IO_FAILURE = "Underlying system problem. {detail}"
MSG_CORRUPT_STATE = "Repository state is corrupt. {detail}"
MSG_INVALID_PATH = "Invalid file path. File: {path} ({reason})"
