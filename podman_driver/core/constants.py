"""Constants used throughout the podman driver."""


# Runtime executable used when no context is given
DEFAULT_PODMAN = "podman"

# Storage options understood by podman's --storage-opt
STORAGE_OPT_FLAG = "--storage-opt"
ADDITIONAL_IMAGE_STORE = "additionalimagestore"
MOUNT_PROGRAM = "mount_program"

# Go templates passed to `podman inspect -f` / `podman info -f`
INSPECT_PID_FORMAT = "{{.State.Pid}}"
INFO_RUNROOT_FORMAT = "{{.Store.RunRoot}}"

# PIDs are reported as unsigned 32-bit integers
MAX_PID = 0xFFFFFFFF

# Default pidfile layout for the overlay storage driver:
# <runroot>/overlay-containers/<container-id>/userdata/pidfile
OVERLAY_CONTAINERS_DIR = "overlay-containers"
PIDFILE_RELATIVE_PATH = ("userdata", "pidfile")

# Parallax migration tool actions
PARALLAX_MIGRATE = "migrate"
PARALLAX_RMI = "rmi"

# Placeholder for arguments that cannot be shown as text
UNPRINTABLE_ARG = "<CANNOT CONVERT>"

# Configuration
CONFIG_ENV_VAR = "PODMAN_DRIVER_CONFIG"
