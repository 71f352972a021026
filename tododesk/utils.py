import os

def get_resource_path(relative_path):
    """
    Get absolute path to a resource: absolute paths pass through, then the
    CWD, then the package directory.
    """
    if os.path.isabs(relative_path):
        return relative_path

    # CWD first so a settings.json next to the user's script wins
    if os.path.exists(relative_path):
        return os.path.abspath(relative_path)

    return os.path.join(os.path.dirname(__file__), relative_path)


def safe_folder_name(title):
    return "".join(c if c.isalnum() or c in ("-", "_") else "_" for c in title).strip("_")
