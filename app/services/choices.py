from enum import Enum


class PostStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class MemberRole(str, Enum):
    ADVISOR = "ADVISOR"
    LEADER = "LEADER"
    CORE_MEMBER = "CORE_MEMBER"
    MEMBER = "MEMBER"
    ALUMNI = "ALUMNI"


class MemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    GRADUATED = "GRADUATED"


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"
    SUSPENDED = "SUSPENDED"
    CANCELLED = "CANCELLED"


class ProjectCategory(str, Enum):
    RESEARCH = "RESEARCH"
    DEVELOPMENT = "DEVELOPMENT"
    COMPETITION = "COMPETITION"
    COLLABORATION = "COLLABORATION"
    OTHER = "OTHER"


class MeetingType(str, Enum):
    REGULAR = "REGULAR"
    EMERGENCY = "EMERGENCY"
    PLANNING = "PLANNING"
    REVIEW = "REVIEW"
    TRAINING = "TRAINING"


class MeetingStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BANNED = "BANNED"
