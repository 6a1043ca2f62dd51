class StoreError(Exception):
    """Raised by repository adapters when the backing store fails (connectivity, write or query errors)"""
