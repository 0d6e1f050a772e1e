"""Per-resource field-selection configuration.

Every resource type declares the fixed set of client-visible field names it
can return. Requested field lists are checked against these allow-lists and
never reach the storage layer, so internal columns cannot be selected.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ResourceType


@dataclass(frozen=True)
class ResourceQueryConfig:
    """Field allow-list and listing defaults for one resource type.

    collection_key is the name under which a list of records is wrapped in
    a collection payload ({collection_key: [...]}). default_limit of None
    means the configured default page size.
    """

    valid_fields: tuple[str, ...]
    collection_key: str
    default_limit: int | None = None


_VERSION_FIELDS = ("_etag", "_lastModifiedDate")

RESOURCE_QUERY_CONFIG: dict[ResourceType, ResourceQueryConfig] = {
    ResourceType.USERS: ResourceQueryConfig(
        valid_fields=(
            "sourcedId",
            "status",
            "username",
            "givenName",
            "familyName",
            "email",
        ),
        collection_key="users",
        default_limit=100,
    ),
    ResourceType.STUDENTS: ResourceQueryConfig(
        valid_fields=(
            "id",
            "studentUniqueId",
            "firstName",
            "middleName",
            "lastSurname",
            "birthDate",
            "birthCity",
            "birthSexDescriptor",
            "citizenshipStatusDescriptor",
            *_VERSION_FIELDS,
        ),
        collection_key="students",
    ),
    ResourceType.STAFF: ResourceQueryConfig(
        valid_fields=(
            "id",
            "staffUniqueId",
            "firstName",
            "lastSurname",
            "sexDescriptor",
            "highestCompletedLevelOfEducationDescriptor",
            "yearsOfPriorProfessionalExperience",
            *_VERSION_FIELDS,
        ),
        collection_key="staffs",
    ),
    ResourceType.COURSES: ResourceQueryConfig(
        valid_fields=(
            "id",
            "courseCode",
            "courseTitle",
            "courseDescription",
            "numberOfParts",
            "educationOrganizationReference",
            "academicSubjectDescriptor",
            *_VERSION_FIELDS,
        ),
        collection_key="courses",
    ),
    ResourceType.CREDENTIALS: ResourceQueryConfig(
        valid_fields=(
            "id",
            "credentialIdentifier",
            "stateOfIssueStateAbbreviationDescriptor",
            "credentialTypeDescriptor",
            "credentialFieldDescriptor",
            "issuanceDate",
            "expirationDate",
            *_VERSION_FIELDS,
        ),
        collection_key="credentials",
    ),
    ResourceType.GRADING_PERIODS: ResourceQueryConfig(
        valid_fields=(
            "id",
            "gradingPeriodDescriptor",
            "gradingPeriodName",
            "schoolReference",
            "schoolYearTypeReference",
            "periodSequence",
            "beginDate",
            "endDate",
            "totalInstructionalDays",
            *_VERSION_FIELDS,
        ),
        collection_key="gradingPeriods",
    ),
    ResourceType.CALENDARS: ResourceQueryConfig(
        valid_fields=(
            "id",
            "calendarCode",
            "schoolReference",
            "schoolYearTypeReference",
            "calendarTypeDescriptor",
            "gradeLevels",
            *_VERSION_FIELDS,
        ),
        collection_key="calendars",
    ),
}


def query_config(resource_type: ResourceType) -> ResourceQueryConfig:
    return RESOURCE_QUERY_CONFIG[resource_type]
