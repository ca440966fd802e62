"""Protocol verbs.

Keep these in one place to avoid stringly-typed message handling.
"""

VERSION = "VERSION"
PROTOCOL_VERSION = "1"

# Inbound requests.

INITREMOTE = "INITREMOTE"
PREPARE = "PREPARE"
TRANSFER = "TRANSFER"
CHECKPRESENT = "CHECKPRESENT"
REMOVE = "REMOVE"
GETCOST = "GETCOST"
GETAVAILABILITY = "GETAVAILABILITY"
WHEREIS = "WHEREIS"
ERROR = "ERROR"

STORE = "STORE"
RETRIEVE = "RETRIEVE"

# Replies.

INITREMOTE_SUCCESS = "INITREMOTE-SUCCESS"
INITREMOTE_FAILURE = "INITREMOTE-FAILURE"
PREPARE_SUCCESS = "PREPARE-SUCCESS"
PREPARE_FAILURE = "PREPARE-FAILURE"
TRANSFER_SUCCESS = "TRANSFER-SUCCESS"
TRANSFER_FAILURE = "TRANSFER-FAILURE"
CHECKPRESENT_SUCCESS = "CHECKPRESENT-SUCCESS"
CHECKPRESENT_FAILURE = "CHECKPRESENT-FAILURE"
CHECKPRESENT_UNKNOWN = "CHECKPRESENT-UNKNOWN"
REMOVE_SUCCESS = "REMOVE-SUCCESS"
REMOVE_FAILURE = "REMOVE-FAILURE"
COST = "COST"
AVAILABILITY = "AVAILABILITY"
WHEREIS_SUCCESS = "WHEREIS-SUCCESS"
WHEREIS_FAILURE = "WHEREIS-FAILURE"
UNSUPPORTED_REQUEST = "UNSUPPORTED-REQUEST"

# Engine-initiated messages. The Get family expects a VALUE reply.

PROGRESS = "PROGRESS"
DEBUG = "DEBUG"
GETCONFIG = "GETCONFIG"
SETCONFIG = "SETCONFIG"
DIRHASH = "DIRHASH"
GETUUID = "GETUUID"
GETGITDIR = "GETGITDIR"
GETSTATE = "GETSTATE"
SETSTATE = "SETSTATE"
SETURLPRESENT = "SETURLPRESENT"
SETURLMISSING = "SETURLMISSING"
SETURIPRESENT = "SETURIPRESENT"
SETURIMISSING = "SETURIMISSING"
GETURLS = "GETURLS"

VALUE = "VALUE"
