from enum import Enum

class Role(str, Enum):
    admin = "System Administrator"
    normal_user = "Normal User"
    store_owner = "Store Owner"
