class SortAPIError(Exception):
    pass
