"""
酒店预订台账
客房、客人、预订、付款、员工的关系模型与经营报表
"""
__version__ = "1.0.0"
