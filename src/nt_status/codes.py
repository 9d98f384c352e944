"""
.. The NTSTATUS name table

Symbolic names of the NTSTATUS values published by Microsoft ([MS-ERREF] 2.3.1),
without the ``STATUS_`` prefix. Names with other prefixes (e.g ``RPC_NT_``,
``DBG_``) are kept verbatim.

This file is generated by :py:func:`nt_status.catalog.render_module`. Do not edit.
"""

from __future__ import annotations

__all__ = ("codes", "aliases")

from types import MappingProxyType

codes = MappingProxyType(
    {
        0x00000000: "SUCCESS",
        0x00000001: "WAIT_1",
        0x00000002: "WAIT_2",
        0x00000003: "WAIT_3",
        0x0000003F: "WAIT_63",
        0x00000080: "ABANDONED",
        0x000000BF: "ABANDONED_WAIT_63",
        0x000000C0: "USER_APC",
        0x000000FF: "ALREADY_COMPLETE",
        0x00000100: "KERNEL_APC",
        0x00000101: "ALERTED",
        0x00000102: "TIMEOUT",
        0x00000103: "PENDING",
        0x00000104: "REPARSE",
        0x00000105: "MORE_ENTRIES",
        0x00000106: "NOT_ALL_ASSIGNED",
        0x00000107: "SOME_NOT_MAPPED",
        0x00000108: "OPLOCK_BREAK_IN_PROGRESS",
        0x00000109: "VOLUME_MOUNTED",
        0x0000010A: "RXACT_COMMITTED",
        0x0000010B: "NOTIFY_CLEANUP",
        0x0000010C: "NOTIFY_ENUM_DIR",
        0x0000010D: "NO_QUOTAS_FOR_ACCOUNT",
        0x0000010E: "PRIMARY_TRANSPORT_CONNECT_FAILED",
        0x00000110: "PAGE_FAULT_TRANSITION",
        0x00000111: "PAGE_FAULT_DEMAND_ZERO",
        0x00000112: "PAGE_FAULT_COPY_ON_WRITE",
        0x00000113: "PAGE_FAULT_GUARD_PAGE",
        0x00000114: "PAGE_FAULT_PAGING_FILE",
        0x00000115: "CACHE_PAGE_LOCKED",
        0x00000116: "CRASH_DUMP",
        0x00000117: "BUFFER_ALL_ZEROS",
        0x00000118: "REPARSE_OBJECT",
        0x00000119: "RESOURCE_REQUIREMENTS_CHANGED",
        0x00000120: "TRANSLATION_COMPLETE",
        0x00000121: "DS_MEMBERSHIP_EVALUATED_LOCALLY",
        0x00000122: "NOTHING_TO_TERMINATE",
        0x00000123: "PROCESS_NOT_IN_JOB",
        0x00000124: "PROCESS_IN_JOB",
        0x00000125: "VOLSNAP_HIBERNATE_READY",
        0x00000126: "FSFILTER_OP_COMPLETED_SUCCESSFULLY",
        0x00000127: "INTERRUPT_VECTOR_ALREADY_CONNECTED",
        0x00000128: "INTERRUPT_STILL_CONNECTED",
        0x00000129: "PROCESS_CLONED",
        0x0000012A: "FILE_LOCKED_WITH_ONLY_READERS",
        0x0000012B: "FILE_LOCKED_WITH_WRITERS",
        0x0000012C: "VALID_IMAGE_HASH",
        0x0000012D: "VALID_CATALOG_HASH",
        0x0000012E: "VALID_STRONG_CODE_HASH",
        0x0000012F: "GHOSTED",
        0x00000130: "DATA_OVERWRITTEN",
        0x00000202: "RESOURCEMANAGER_READ_ONLY",
        0x00000210: "RING_PREVIOUSLY_EMPTY",
        0x00000211: "RING_PREVIOUSLY_FULL",
        0x00000212: "RING_PREVIOUSLY_ABOVE_QUOTA",
        0x00000213: "RING_NEWLY_EMPTY",
        0x00000214: "RING_SIGNAL_OPPOSITE_ENDPOINT",
        0x00000215: "OPLOCK_SWITCHED_TO_NEW_HANDLE",
        0x00000216: "OPLOCK_HANDLE_CLOSED",
        0x00000367: "WAIT_FOR_OPLOCK",
        0x00000368: "REPARSE_GLOBAL",
        0x00010001: "DBG_EXCEPTION_HANDLED",
        0x00010002: "DBG_CONTINUE",
        0x001C0001: "FLT_IO_COMPLETE",
        0x00293000: "RTPM_CONTEXT_CONTINUE",
        0x00293001: "RTPM_CONTEXT_COMPLETE",
        0x00350059: "HV_PENDING_PAGE_REQUESTS",
        0x00E70000: "SPACES_REPAIRED",
        0x00E70001: "SPACES_PAUSE",
        0x00E70002: "SPACES_COMPLETE",
        0x00E70003: "SPACES_REDIRECT",
        0x40000000: "OBJECT_NAME_EXISTS",
        0x40000001: "THREAD_WAS_SUSPENDED",
        0x40000002: "WORKING_SET_LIMIT_RANGE",
        0x40000003: "IMAGE_NOT_AT_BASE",
        0x40000004: "RXACT_STATE_CREATED",
        0x40000005: "SEGMENT_NOTIFICATION",
        0x40000006: "LOCAL_USER_SESSION_KEY",
        0x40000007: "BAD_CURRENT_DIRECTORY",
        0x40000008: "SERIAL_MORE_WRITES",
        0x40000009: "REGISTRY_RECOVERED",
        0x4000000A: "FT_READ_RECOVERY_FROM_BACKUP",
        0x4000000B: "FT_WRITE_RECOVERY",
        0x4000000C: "SERIAL_COUNTER_TIMEOUT",
        0x4000000D: "NULL_LM_PASSWORD",
        0x4000000E: "IMAGE_MACHINE_TYPE_MISMATCH",
        0x4000000F: "RECEIVE_PARTIAL",
        0x40000010: "RECEIVE_EXPEDITED",
        0x40000011: "RECEIVE_PARTIAL_EXPEDITED",
        0x40000012: "EVENT_DONE",
        0x40000013: "EVENT_PENDING",
        0x40000014: "CHECKING_FILE_SYSTEM",
        0x40000015: "FATAL_APP_EXIT",
        0x40000016: "PREDEFINED_HANDLE",
        0x40000017: "WAS_UNLOCKED",
        0x40000018: "SERVICE_NOTIFICATION",
        0x40000019: "WAS_LOCKED",
        0x4000001A: "LOG_HARD_ERROR",
        0x4000001B: "ALREADY_WIN32",
        0x4000001C: "WX86_UNSIMULATE",
        0x4000001D: "WX86_CONTINUE",
        0x4000001E: "WX86_SINGLE_STEP",
        0x4000001F: "WX86_BREAKPOINT",
        0x40000020: "WX86_EXCEPTION_CONTINUE",
        0x40000021: "WX86_EXCEPTION_LASTCHANCE",
        0x40000022: "WX86_EXCEPTION_CHAIN",
        0x40000023: "IMAGE_MACHINE_TYPE_MISMATCH_EXE",
        0x40000024: "NO_YIELD_PERFORMED",
        0x40000025: "TIMER_RESUME_IGNORED",
        0x40000026: "ARBITRATION_UNHANDLED",
        0x40000027: "CARDBUS_NOT_SUPPORTED",
        0x40000028: "WX86_CREATEWX86TIB",
        0x40000029: "MP_PROCESSOR_MISMATCH",
        0x4000002A: "HIBERNATED",
        0x4000002B: "RESUME_HIBERNATION",
        0x4000002C: "FIRMWARE_UPDATED",
        0x4000002D: "DRIVERS_LEAKING_LOCKED_PAGES",
        0x4000002E: "MESSAGE_RETRIEVED",
        0x4000002F: "SYSTEM_POWERSTATE_TRANSITION",
        0x40000030: "ALPC_CHECK_COMPLETION_LIST",
        0x40000031: "SYSTEM_POWERSTATE_COMPLEX_TRANSITION",
        0x40000032: "ACCESS_AUDIT_BY_POLICY",
        0x40000033: "ABANDON_HIBERFILE",
        0x40000034: "BIZRULES_NOT_ENABLED",
        0x40000035: "FT_READ_FROM_COPY",
        0x40000036: "IMAGE_AT_DIFFERENT_BASE",
        0x40000037: "PATCH_DEFERRED",
        0x40000294: "WAKE_SYSTEM",
        0x40000370: "DS_SHUTTING_DOWN",
        0x40000807: "DISK_REPAIR_REDIRECTED",
        0x4000A144: "SERVICES_FAILED_AUTOSTART",
        0x40010001: "DBG_REPLY_LATER",
        0x40010002: "DBG_UNABLE_TO_PROVIDE_HANDLE",
        0x40010003: "DBG_TERMINATE_THREAD",
        0x40010004: "DBG_TERMINATE_PROCESS",
        0x40010005: "DBG_CONTROL_C",
        0x40010006: "DBG_PRINTEXCEPTION_C",
        0x40010007: "DBG_RIPEXCEPTION",
        0x40010008: "DBG_CONTROL_BREAK",
        0x40010009: "DBG_COMMAND_EXCEPTION",
        0x40020056: "RPC_NT_UUID_LOCAL_ONLY",
        0x400200AF: "RPC_NT_SEND_INCOMPLETE",
        0x400A0004: "CTX_CDM_CONNECT",
        0x400A0005: "CTX_CDM_DISCONNECT",
        0x4015000D: "SXS_RELEASE_ACTIVATION_CONTEXT",
        0x40190001: "HEURISTIC_DAMAGE_POSSIBLE",
        0x40190034: "RECOVERY_NOT_NEEDED",
        0x40190035: "RM_ALREADY_STARTED",
        0x401A000C: "LOG_NO_RESTART",
        0x401B00EC: "VIDEO_DRIVER_DEBUG_REPORT_REQUEST",
        0x401E000A: "GRAPHICS_PARTIAL_DATA_POPULATED",
        0x401E0201: "GRAPHICS_SKIP_ALLOCATION_PREPARATION",
        0x401E0307: "GRAPHICS_MODE_NOT_PINNED",
        0x401E031E: "GRAPHICS_NO_PREFERRED_MODE",
        0x401E034B: "GRAPHICS_DATASET_IS_EMPTY",
        0x401E034C: "GRAPHICS_NO_MORE_ELEMENTS_IN_DATASET",
        0x401E0351: "GRAPHICS_PATH_CONTENT_GEOMETRY_TRANSFORMATION_NOT_PINNED",
        0x401E042F: "GRAPHICS_UNKNOWN_CHILD_STATUS",
        0x401E0437: "GRAPHICS_LEADLINK_START_DEFERRED",
        0x401E0439: "GRAPHICS_POLLING_TOO_FREQUENTLY",
        0x401E043A: "GRAPHICS_START_DEFERRED",
        0x401E043C: "GRAPHICS_DEPENDABLE_CHILD_STATUS",
        0x40230001: "NDIS_INDICATION_REQUIRED",
        0x40292023: "PCP_UNSUPPORTED_PSS_SALT",
        0x80000001: "GUARD_PAGE_VIOLATION",
        0x80000002: "DATATYPE_MISALIGNMENT",
        0x80000003: "BREAKPOINT",
        0x80000004: "SINGLE_STEP",
        0x80000005: "BUFFER_OVERFLOW",
        0x80000006: "NO_MORE_FILES",
        0x80000007: "WAKE_SYSTEM_DEBUGGER",
        0x8000000A: "HANDLES_CLOSED",
        0x8000000B: "NO_INHERITANCE",
        0x8000000C: "GUID_SUBSTITUTION_MADE",
        0x8000000D: "PARTIAL_COPY",
        0x8000000E: "DEVICE_PAPER_EMPTY",
        0x8000000F: "DEVICE_POWERED_OFF",
        0x80000010: "DEVICE_OFF_LINE",
        0x80000011: "DEVICE_BUSY",
        0x80000012: "NO_MORE_EAS",
        0x80000013: "INVALID_EA_NAME",
        0x80000014: "EA_LIST_INCONSISTENT",
        0x80000015: "INVALID_EA_FLAG",
        0x80000016: "VERIFY_REQUIRED",
        0x80000017: "EXTRANEOUS_INFORMATION",
        0x80000018: "RXACT_COMMIT_NECESSARY",
        0x8000001A: "NO_MORE_ENTRIES",
        0x8000001B: "FILEMARK_DETECTED",
        0x8000001C: "MEDIA_CHANGED",
        0x8000001D: "BUS_RESET",
        0x8000001E: "END_OF_MEDIA",
        0x8000001F: "BEGINNING_OF_MEDIA",
        0x80000020: "MEDIA_CHECK",
        0x80000021: "SETMARK_DETECTED",
        0x80000022: "NO_DATA_DETECTED",
        0x80000023: "REDIRECTOR_HAS_OPEN_HANDLES",
        0x80000024: "SERVER_HAS_OPEN_HANDLES",
        0x80000025: "ALREADY_DISCONNECTED",
        0x80000026: "LONGJUMP",
        0x80000027: "CLEANER_CARTRIDGE_INSTALLED",
        0x80000028: "PLUGPLAY_QUERY_VETOED",
        0x80000029: "UNWIND_CONSOLIDATE",
        0x8000002A: "REGISTRY_HIVE_RECOVERED",
        0x8000002B: "DLL_MIGHT_BE_INSECURE",
        0x8000002C: "DLL_MIGHT_BE_INCOMPATIBLE",
        0x8000002D: "STOPPED_ON_SYMLINK",
        0x8000002E: "CANNOT_GRANT_REQUESTED_OPLOCK",
        0x8000002F: "NO_ACE_CONDITION",
        0x80000030: "DEVICE_SUPPORT_IN_PROGRESS",
        0x80000031: "DEVICE_POWER_CYCLE_REQUIRED",
        0x80000032: "NO_WORK_DONE",
        0x80000288: "DEVICE_REQUIRES_CLEANING",
        0x80000289: "DEVICE_DOOR_OPEN",
        0x80000803: "DATA_LOST_REPAIR",
        0x8000A127: "GPIO_INTERRUPT_ALREADY_UNMASKED",
        0x8000CF00: "CLOUD_FILE_PROPERTY_BLOB_CHECKSUM_MISMATCH",
        0x8000CF04: "CLOUD_FILE_PROPERTY_BLOB_TOO_LARGE",
        0x8000CF05: "CLOUD_FILE_TOO_MANY_PROPERTY_BLOBS",
        0x80010001: "DBG_EXCEPTION_NOT_HANDLED",
        0x80130001: "CLUSTER_NODE_ALREADY_UP",
        0x80130002: "CLUSTER_NODE_ALREADY_DOWN",
        0x80130003: "CLUSTER_NETWORK_ALREADY_ONLINE",
        0x80130004: "CLUSTER_NETWORK_ALREADY_OFFLINE",
        0x80130005: "CLUSTER_NODE_ALREADY_MEMBER",
        0x80190009: "COULD_NOT_RESIZE_LOG",
        0x80190029: "NO_TXF_METADATA",
        0x80190031: "CANT_RECOVER_WITH_HANDLE_OPEN",
        0x80190041: "TXF_METADATA_ALREADY_PRESENT",
        0x80190042: "TRANSACTION_SCOPE_CALLBACKS_NOT_SET",
        0x801B00EB: "VIDEO_HUNG_DISPLAY_DRIVER_THREAD_RECOVERED",
        0x801C0001: "FLT_BUFFER_TOO_SMALL",
        0x80210001: "FVE_PARTIAL_METADATA",
        0x80210002: "FVE_TRANSIENT_STATE",
        0x80370001: "VID_REMOTE_NODE_PARENT_GPA_PAGES_USED",
        0x80380001: "VOLMGR_INCOMPLETE_REGENERATION",
        0x80380002: "VOLMGR_INCOMPLETE_DISK_MIGRATION",
        0x80390001: "BCD_NOT_ALL_ENTRIES_IMPORTED",
        0x80390003: "BCD_NOT_ALL_ENTRIES_SYNCHRONIZED",
        0x803A0001: "QUERY_STORAGE_ERROR",
        0x803F0001: "GDI_HANDLE_LEAK",
        0x80430006: "SECUREBOOT_NOT_ENABLED",
        0xC0000001: "UNSUCCESSFUL",
        0xC0000002: "NOT_IMPLEMENTED",
        0xC0000003: "INVALID_INFO_CLASS",
        0xC0000004: "INFO_LENGTH_MISMATCH",
        0xC0000005: "ACCESS_VIOLATION",
        0xC0000006: "IN_PAGE_ERROR",
        0xC0000007: "PAGEFILE_QUOTA",
        0xC0000008: "INVALID_HANDLE",
        0xC0000009: "BAD_INITIAL_STACK",
        0xC000000A: "BAD_INITIAL_PC",
        0xC000000B: "INVALID_CID",
        0xC000000C: "TIMER_NOT_CANCELED",
        0xC000000D: "INVALID_PARAMETER",
        0xC000000E: "NO_SUCH_DEVICE",
        0xC000000F: "NO_SUCH_FILE",
        0xC0000010: "INVALID_DEVICE_REQUEST",
        0xC0000011: "END_OF_FILE",
        0xC0000012: "WRONG_VOLUME",
        0xC0000013: "NO_MEDIA_IN_DEVICE",
        0xC0000014: "UNRECOGNIZED_MEDIA",
        0xC0000015: "NONEXISTENT_SECTOR",
        0xC0000016: "MORE_PROCESSING_REQUIRED",
        0xC0000017: "NO_MEMORY",
        0xC0000018: "CONFLICTING_ADDRESSES",
        0xC0000019: "NOT_MAPPED_VIEW",
        0xC000001A: "UNABLE_TO_FREE_VM",
        0xC000001B: "UNABLE_TO_DELETE_SECTION",
        0xC000001C: "INVALID_SYSTEM_SERVICE",
        0xC000001D: "ILLEGAL_INSTRUCTION",
        0xC000001E: "INVALID_LOCK_SEQUENCE",
        0xC000001F: "INVALID_VIEW_SIZE",
        0xC0000020: "INVALID_FILE_FOR_SECTION",
        0xC0000021: "ALREADY_COMMITTED",
        0xC0000022: "ACCESS_DENIED",
        0xC0000023: "BUFFER_TOO_SMALL",
        0xC0000024: "OBJECT_TYPE_MISMATCH",
        0xC0000025: "NONCONTINUABLE_EXCEPTION",
        0xC0000026: "INVALID_DISPOSITION",
        0xC0000027: "UNWIND",
        0xC0000028: "BAD_STACK",
        0xC0000029: "INVALID_UNWIND_TARGET",
        0xC000002A: "NOT_LOCKED",
        0xC000002B: "PARITY_ERROR",
        0xC000002C: "UNABLE_TO_DECOMMIT_VM",
        0xC000002D: "NOT_COMMITTED",
        0xC000002E: "INVALID_PORT_ATTRIBUTES",
        0xC000002F: "PORT_MESSAGE_TOO_LONG",
        0xC0000030: "INVALID_PARAMETER_MIX",
        0xC0000031: "INVALID_QUOTA_LOWER",
        0xC0000032: "DISK_CORRUPT_ERROR",
        0xC0000033: "OBJECT_NAME_INVALID",
        0xC0000034: "OBJECT_NAME_NOT_FOUND",
        0xC0000035: "OBJECT_NAME_COLLISION",
        0xC0000036: "PORT_DO_NOT_DISTURB",
        0xC0000037: "PORT_DISCONNECTED",
        0xC0000038: "DEVICE_ALREADY_ATTACHED",
        0xC0000039: "OBJECT_PATH_INVALID",
        0xC000003A: "OBJECT_PATH_NOT_FOUND",
        0xC000003B: "OBJECT_PATH_SYNTAX_BAD",
        0xC000003C: "DATA_OVERRUN",
        0xC000003D: "DATA_LATE_ERROR",
        0xC000003E: "DATA_ERROR",
        0xC000003F: "CRC_ERROR",
        0xC0000040: "SECTION_TOO_BIG",
        0xC0000041: "PORT_CONNECTION_REFUSED",
        0xC0000042: "INVALID_PORT_HANDLE",
        0xC0000043: "SHARING_VIOLATION",
        0xC0000044: "QUOTA_EXCEEDED",
        0xC0000045: "INVALID_PAGE_PROTECTION",
        0xC0000046: "MUTANT_NOT_OWNED",
        0xC0000047: "SEMAPHORE_LIMIT_EXCEEDED",
        0xC0000048: "PORT_ALREADY_SET",
        0xC0000049: "SECTION_NOT_IMAGE",
        0xC000004A: "SUSPEND_COUNT_EXCEEDED",
        0xC000004B: "THREAD_IS_TERMINATING",
        0xC000004C: "BAD_WORKING_SET_LIMIT",
        0xC000004D: "INCOMPATIBLE_FILE_MAP",
        0xC000004E: "SECTION_PROTECTION",
        0xC000004F: "EAS_NOT_SUPPORTED",
        0xC0000050: "EA_TOO_LARGE",
        0xC0000051: "NONEXISTENT_EA_ENTRY",
        0xC0000052: "NO_EAS_ON_FILE",
        0xC0000053: "EA_CORRUPT_ERROR",
        0xC0000054: "FILE_LOCK_CONFLICT",
        0xC0000055: "LOCK_NOT_GRANTED",
        0xC0000056: "DELETE_PENDING",
        0xC0000057: "CTL_FILE_NOT_SUPPORTED",
        0xC0000058: "UNKNOWN_REVISION",
        0xC0000059: "REVISION_MISMATCH",
        0xC000005A: "INVALID_OWNER",
        0xC000005B: "INVALID_PRIMARY_GROUP",
        0xC000005C: "NO_IMPERSONATION_TOKEN",
        0xC000005D: "CANT_DISABLE_MANDATORY",
        0xC000005E: "NO_LOGON_SERVERS",
        0xC000005F: "NO_SUCH_LOGON_SESSION",
        0xC0000060: "NO_SUCH_PRIVILEGE",
        0xC0000061: "PRIVILEGE_NOT_HELD",
        0xC0000062: "INVALID_ACCOUNT_NAME",
        0xC0000063: "USER_EXISTS",
        0xC0000064: "NO_SUCH_USER",
        0xC0000065: "GROUP_EXISTS",
        0xC0000066: "NO_SUCH_GROUP",
        0xC0000067: "MEMBER_IN_GROUP",
        0xC0000068: "MEMBER_NOT_IN_GROUP",
        0xC0000069: "LAST_ADMIN",
        0xC000006A: "WRONG_PASSWORD",
        0xC000006B: "ILL_FORMED_PASSWORD",
        0xC000006C: "PASSWORD_RESTRICTION",
        0xC000006D: "LOGON_FAILURE",
        0xC000006E: "ACCOUNT_RESTRICTION",
        0xC000006F: "INVALID_LOGON_HOURS",
        0xC0000070: "INVALID_WORKSTATION",
        0xC0000071: "PASSWORD_EXPIRED",
        0xC0000072: "ACCOUNT_DISABLED",
        0xC0000073: "NONE_MAPPED",
        0xC0000074: "TOO_MANY_LUIDS_REQUESTED",
        0xC0000075: "LUIDS_EXHAUSTED",
        0xC0000076: "INVALID_SUB_AUTHORITY",
        0xC0000077: "INVALID_ACL",
        0xC0000078: "INVALID_SID",
        0xC0000079: "INVALID_SECURITY_DESCR",
        0xC000007A: "PROCEDURE_NOT_FOUND",
        0xC000007B: "INVALID_IMAGE_FORMAT",
        0xC000007C: "NO_TOKEN",
        0xC000007D: "BAD_INHERITANCE_ACL",
        0xC000007E: "RANGE_NOT_LOCKED",
        0xC000007F: "DISK_FULL",
        0xC0000080: "SERVER_DISABLED",
        0xC0000081: "SERVER_NOT_DISABLED",
        0xC0000082: "TOO_MANY_GUIDS_REQUESTED",
        0xC0000083: "GUIDS_EXHAUSTED",
        0xC0000084: "INVALID_ID_AUTHORITY",
        0xC0000085: "AGENTS_EXHAUSTED",
        0xC0000086: "INVALID_VOLUME_LABEL",
        0xC0000087: "SECTION_NOT_EXTENDED",
        0xC0000088: "NOT_MAPPED_DATA",
        0xC0000089: "RESOURCE_DATA_NOT_FOUND",
        0xC000008A: "RESOURCE_TYPE_NOT_FOUND",
        0xC000008B: "RESOURCE_NAME_NOT_FOUND",
        0xC000008C: "ARRAY_BOUNDS_EXCEEDED",
        0xC000008D: "FLOAT_DENORMAL_OPERAND",
        0xC000008E: "FLOAT_DIVIDE_BY_ZERO",
        0xC000008F: "FLOAT_INEXACT_RESULT",
        0xC0000090: "FLOAT_INVALID_OPERATION",
        0xC0000091: "FLOAT_OVERFLOW",
        0xC0000092: "FLOAT_STACK_CHECK",
        0xC0000093: "FLOAT_UNDERFLOW",
        0xC0000094: "INTEGER_DIVIDE_BY_ZERO",
        0xC0000095: "INTEGER_OVERFLOW",
        0xC0000096: "PRIVILEGED_INSTRUCTION",
        0xC0000097: "TOO_MANY_PAGING_FILES",
        0xC0000098: "FILE_INVALID",
        0xC0000099: "ALLOTTED_SPACE_EXCEEDED",
        0xC000009A: "INSUFFICIENT_RESOURCES",
        0xC000009B: "DFS_EXIT_PATH_FOUND",
        0xC000009C: "DEVICE_DATA_ERROR",
        0xC000009D: "DEVICE_NOT_CONNECTED",
        0xC000009E: "DEVICE_POWER_FAILURE",
        0xC000009F: "FREE_VM_NOT_AT_BASE",
        0xC00000A0: "MEMORY_NOT_ALLOCATED",
        0xC00000A1: "WORKING_SET_QUOTA",
        0xC00000A2: "MEDIA_WRITE_PROTECTED",
        0xC00000A3: "DEVICE_NOT_READY",
        0xC00000A4: "INVALID_GROUP_ATTRIBUTES",
        0xC00000A5: "BAD_IMPERSONATION_LEVEL",
        0xC00000A6: "CANT_OPEN_ANONYMOUS",
        0xC00000A7: "BAD_VALIDATION_CLASS",
        0xC00000A8: "BAD_TOKEN_TYPE",
        0xC00000A9: "BAD_MASTER_BOOT_RECORD",
        0xC00000AA: "INSTRUCTION_MISALIGNMENT",
        0xC00000AB: "INSTANCE_NOT_AVAILABLE",
        0xC00000AC: "PIPE_NOT_AVAILABLE",
        0xC00000AD: "INVALID_PIPE_STATE",
        0xC00000AE: "PIPE_BUSY",
        0xC00000AF: "ILLEGAL_FUNCTION",
        0xC00000B0: "PIPE_DISCONNECTED",
        0xC00000B1: "PIPE_CLOSING",
        0xC00000B2: "PIPE_CONNECTED",
        0xC00000B3: "PIPE_LISTENING",
        0xC00000B4: "INVALID_READ_MODE",
        0xC00000B5: "IO_TIMEOUT",
        0xC00000B6: "FILE_FORCED_CLOSED",
        0xC00000B7: "PROFILING_NOT_STARTED",
        0xC00000B8: "PROFILING_NOT_STOPPED",
        0xC00000B9: "COULD_NOT_INTERPRET",
        0xC00000BA: "FILE_IS_A_DIRECTORY",
        0xC00000BB: "NOT_SUPPORTED",
        0xC00000BC: "REMOTE_NOT_LISTENING",
        0xC00000BD: "DUPLICATE_NAME",
        0xC00000BE: "BAD_NETWORK_PATH",
        0xC00000BF: "NETWORK_BUSY",
        0xC00000C0: "DEVICE_DOES_NOT_EXIST",
        0xC00000C1: "TOO_MANY_COMMANDS",
        0xC00000C2: "ADAPTER_HARDWARE_ERROR",
        0xC00000C3: "INVALID_NETWORK_RESPONSE",
        0xC00000C4: "UNEXPECTED_NETWORK_ERROR",
        0xC00000C5: "BAD_REMOTE_ADAPTER",
        0xC00000C6: "PRINT_QUEUE_FULL",
        0xC00000C7: "NO_SPOOL_SPACE",
        0xC00000C8: "PRINT_CANCELLED",
        0xC00000C9: "NETWORK_NAME_DELETED",
        0xC00000CA: "NETWORK_ACCESS_DENIED",
        0xC00000CB: "BAD_DEVICE_TYPE",
        0xC00000CC: "BAD_NETWORK_NAME",
        0xC00000CD: "TOO_MANY_NAMES",
        0xC00000CE: "TOO_MANY_SESSIONS",
        0xC00000CF: "SHARING_PAUSED",
        0xC00000D0: "REQUEST_NOT_ACCEPTED",
        0xC00000D1: "REDIRECTOR_PAUSED",
        0xC00000D2: "NET_WRITE_FAULT",
        0xC00000D3: "PROFILING_AT_LIMIT",
        0xC00000D4: "NOT_SAME_DEVICE",
        0xC00000D5: "FILE_RENAMED",
        0xC00000D6: "VIRTUAL_CIRCUIT_CLOSED",
        0xC00000D7: "NO_SECURITY_ON_OBJECT",
        0xC00000D8: "CANT_WAIT",
        0xC00000D9: "PIPE_EMPTY",
        0xC00000DA: "CANT_ACCESS_DOMAIN_INFO",
        0xC00000DB: "CANT_TERMINATE_SELF",
        0xC00000DC: "INVALID_SERVER_STATE",
        0xC00000DD: "INVALID_DOMAIN_STATE",
        0xC00000DE: "INVALID_DOMAIN_ROLE",
        0xC00000DF: "NO_SUCH_DOMAIN",
        0xC00000E0: "DOMAIN_EXISTS",
        0xC00000E1: "DOMAIN_LIMIT_EXCEEDED",
        0xC00000E2: "OPLOCK_NOT_GRANTED",
        0xC00000E3: "INVALID_OPLOCK_PROTOCOL",
        0xC00000E4: "INTERNAL_DB_CORRUPTION",
        0xC00000E5: "INTERNAL_ERROR",
        0xC00000E6: "GENERIC_NOT_MAPPED",
        0xC00000E7: "BAD_DESCRIPTOR_FORMAT",
        0xC00000E8: "INVALID_USER_BUFFER",
        0xC00000E9: "UNEXPECTED_IO_ERROR",
        0xC00000EA: "UNEXPECTED_MM_CREATE_ERR",
        0xC00000EB: "UNEXPECTED_MM_MAP_ERROR",
        0xC00000EC: "UNEXPECTED_MM_EXTEND_ERR",
        0xC00000ED: "NOT_LOGON_PROCESS",
        0xC00000EE: "LOGON_SESSION_EXISTS",
        0xC00000EF: "INVALID_PARAMETER_1",
        0xC00000F0: "INVALID_PARAMETER_2",
        0xC00000F1: "INVALID_PARAMETER_3",
        0xC00000F2: "INVALID_PARAMETER_4",
        0xC00000F3: "INVALID_PARAMETER_5",
        0xC00000F4: "INVALID_PARAMETER_6",
        0xC00000F5: "INVALID_PARAMETER_7",
        0xC00000F6: "INVALID_PARAMETER_8",
        0xC00000F7: "INVALID_PARAMETER_9",
        0xC00000F8: "INVALID_PARAMETER_10",
        0xC00000F9: "INVALID_PARAMETER_11",
        0xC00000FA: "INVALID_PARAMETER_12",
        0xC00000FB: "REDIRECTOR_NOT_STARTED",
        0xC00000FC: "REDIRECTOR_STARTED",
        0xC00000FD: "STACK_OVERFLOW",
        0xC00000FE: "NO_SUCH_PACKAGE",
        0xC00000FF: "BAD_FUNCTION_TABLE",
        0xC0000100: "VARIABLE_NOT_FOUND",
        0xC0000101: "DIRECTORY_NOT_EMPTY",
        0xC0000102: "FILE_CORRUPT_ERROR",
        0xC0000103: "NOT_A_DIRECTORY",
        0xC0000104: "BAD_LOGON_SESSION_STATE",
        0xC0000105: "LOGON_SESSION_COLLISION",
        0xC0000106: "NAME_TOO_LONG",
        0xC0000107: "FILES_OPEN",
        0xC0000108: "CONNECTION_IN_USE",
        0xC0000109: "MESSAGE_NOT_FOUND",
        0xC000010A: "PROCESS_IS_TERMINATING",
        0xC000010B: "INVALID_LOGON_TYPE",
        0xC000010C: "NO_GUID_TRANSLATION",
        0xC000010D: "CANNOT_IMPERSONATE",
        0xC000010E: "IMAGE_ALREADY_LOADED",
        0xC000010F: "ABIOS_NOT_PRESENT",
        0xC0000110: "ABIOS_LID_NOT_EXIST",
        0xC0000111: "ABIOS_LID_ALREADY_OWNED",
        0xC0000112: "ABIOS_NOT_LID_OWNER",
        0xC0000113: "ABIOS_INVALID_COMMAND",
        0xC0000114: "ABIOS_INVALID_LID",
        0xC0000115: "ABIOS_SELECTOR_NOT_AVAILABLE",
        0xC0000116: "ABIOS_INVALID_SELECTOR",
        0xC0000117: "NO_LDT",
        0xC0000118: "INVALID_LDT_SIZE",
        0xC0000119: "INVALID_LDT_OFFSET",
        0xC000011A: "INVALID_LDT_DESCRIPTOR",
        0xC000011B: "INVALID_IMAGE_NE_FORMAT",
        0xC000011C: "RXACT_INVALID_STATE",
        0xC000011D: "RXACT_COMMIT_FAILURE",
        0xC000011E: "MAPPED_FILE_SIZE_ZERO",
        0xC000011F: "TOO_MANY_OPENED_FILES",
        0xC0000120: "CANCELLED",
        0xC0000121: "CANNOT_DELETE",
        0xC0000122: "INVALID_COMPUTER_NAME",
        0xC0000123: "FILE_DELETED",
        0xC0000124: "SPECIAL_ACCOUNT",
        0xC0000125: "SPECIAL_GROUP",
        0xC0000126: "SPECIAL_USER",
        0xC0000127: "MEMBERS_PRIMARY_GROUP",
        0xC0000128: "FILE_CLOSED",
        0xC0000129: "TOO_MANY_THREADS",
        0xC000012A: "THREAD_NOT_IN_PROCESS",
        0xC000012B: "TOKEN_ALREADY_IN_USE",
        0xC000012C: "PAGEFILE_QUOTA_EXCEEDED",
        0xC000012D: "COMMITMENT_LIMIT",
        0xC000012E: "INVALID_IMAGE_LE_FORMAT",
        0xC000012F: "INVALID_IMAGE_NOT_MZ",
        0xC0000130: "INVALID_IMAGE_PROTECT",
        0xC0000131: "INVALID_IMAGE_WIN_16",
        0xC0000132: "LOGON_SERVER_CONFLICT",
        0xC0000133: "TIME_DIFFERENCE_AT_DC",
        0xC0000134: "SYNCHRONIZATION_REQUIRED",
        0xC0000135: "DLL_NOT_FOUND",
        0xC0000136: "OPEN_FAILED",
        0xC0000137: "IO_PRIVILEGE_FAILED",
        0xC0000138: "ORDINAL_NOT_FOUND",
        0xC0000139: "ENTRYPOINT_NOT_FOUND",
        0xC000013A: "CONTROL_C_EXIT",
        0xC000013B: "LOCAL_DISCONNECT",
        0xC000013C: "REMOTE_DISCONNECT",
        0xC000013D: "REMOTE_RESOURCES",
        0xC000013E: "LINK_FAILED",
        0xC000013F: "LINK_TIMEOUT",
        0xC0000140: "INVALID_CONNECTION",
        0xC0000141: "INVALID_ADDRESS",
        0xC0000142: "DLL_INIT_FAILED",
        0xC0000143: "MISSING_SYSTEMFILE",
        0xC0000144: "UNHANDLED_EXCEPTION",
        0xC0000145: "APP_INIT_FAILURE",
        0xC0000146: "PAGEFILE_CREATE_FAILED",
        0xC0000147: "NO_PAGEFILE",
        0xC0000148: "INVALID_LEVEL",
        0xC0000149: "WRONG_PASSWORD_CORE",
        0xC000014A: "ILLEGAL_FLOAT_CONTEXT",
        0xC000014B: "PIPE_BROKEN",
        0xC000014C: "REGISTRY_CORRUPT",
        0xC000014D: "REGISTRY_IO_FAILED",
        0xC000014E: "NO_EVENT_PAIR",
        0xC000014F: "UNRECOGNIZED_VOLUME",
        0xC0000150: "SERIAL_NO_DEVICE_INITED",
        0xC0000151: "NO_SUCH_ALIAS",
        0xC0000152: "MEMBER_NOT_IN_ALIAS",
        0xC0000153: "MEMBER_IN_ALIAS",
        0xC0000154: "ALIAS_EXISTS",
        0xC0000155: "LOGON_NOT_GRANTED",
        0xC0000156: "TOO_MANY_SECRETS",
        0xC0000157: "SECRET_TOO_LONG",
        0xC0000158: "INTERNAL_DB_ERROR",
        0xC0000159: "FULLSCREEN_MODE",
        0xC000015A: "TOO_MANY_CONTEXT_IDS",
        0xC000015B: "LOGON_TYPE_NOT_GRANTED",
        0xC000015C: "NOT_REGISTRY_FILE",
        0xC000015D: "NT_CROSS_ENCRYPTION_REQUIRED",
        0xC000015E: "DOMAIN_CTRLR_CONFIG_ERROR",
        0xC000015F: "FT_MISSING_MEMBER",
        0xC0000160: "ILL_FORMED_SERVICE_ENTRY",
        0xC0000161: "ILLEGAL_CHARACTER",
        0xC0000162: "UNMAPPABLE_CHARACTER",
        0xC0000163: "UNDEFINED_CHARACTER",
        0xC0000164: "FLOPPY_VOLUME",
        0xC0000165: "FLOPPY_ID_MARK_NOT_FOUND",
        0xC0000166: "FLOPPY_WRONG_CYLINDER",
        0xC0000167: "FLOPPY_UNKNOWN_ERROR",
        0xC0000168: "FLOPPY_BAD_REGISTERS",
        0xC0000169: "DISK_RECALIBRATE_FAILED",
        0xC000016A: "DISK_OPERATION_FAILED",
        0xC000016B: "DISK_RESET_FAILED",
        0xC000016C: "SHARED_IRQ_BUSY",
        0xC000016D: "FT_ORPHANING",
        0xC000016E: "BIOS_FAILED_TO_CONNECT_INTERRUPT",
        0xC0000172: "PARTITION_FAILURE",
        0xC0000173: "INVALID_BLOCK_LENGTH",
        0xC0000174: "DEVICE_NOT_PARTITIONED",
        0xC0000175: "UNABLE_TO_LOCK_MEDIA",
        0xC0000176: "UNABLE_TO_UNLOAD_MEDIA",
        0xC0000177: "EOM_OVERFLOW",
        0xC0000178: "NO_MEDIA",
        0xC000017A: "NO_SUCH_MEMBER",
        0xC000017B: "INVALID_MEMBER",
        0xC000017C: "KEY_DELETED",
        0xC000017D: "NO_LOG_SPACE",
        0xC000017E: "TOO_MANY_SIDS",
        0xC000017F: "LM_CROSS_ENCRYPTION_REQUIRED",
        0xC0000180: "KEY_HAS_CHILDREN",
        0xC0000181: "CHILD_MUST_BE_VOLATILE",
        0xC0000182: "DEVICE_CONFIGURATION_ERROR",
        0xC0000183: "DRIVER_INTERNAL_ERROR",
        0xC0000184: "INVALID_DEVICE_STATE",
        0xC0000185: "IO_DEVICE_ERROR",
        0xC0000186: "DEVICE_PROTOCOL_ERROR",
        0xC0000187: "BACKUP_CONTROLLER",
        0xC0000188: "LOG_FILE_FULL",
        0xC0000189: "TOO_LATE",
        0xC000018A: "NO_TRUST_LSA_SECRET",
        0xC000018B: "NO_TRUST_SAM_ACCOUNT",
        0xC000018C: "TRUSTED_DOMAIN_FAILURE",
        0xC000018D: "TRUSTED_RELATIONSHIP_FAILURE",
        0xC000018E: "EVENTLOG_FILE_CORRUPT",
        0xC000018F: "EVENTLOG_CANT_START",
        0xC0000190: "TRUST_FAILURE",
        0xC0000191: "MUTANT_LIMIT_EXCEEDED",
        0xC0000192: "NETLOGON_NOT_STARTED",
        0xC0000193: "ACCOUNT_EXPIRED",
        0xC0000194: "POSSIBLE_DEADLOCK",
        0xC0000195: "NETWORK_CREDENTIAL_CONFLICT",
        0xC0000196: "REMOTE_SESSION_LIMIT",
        0xC0000197: "EVENTLOG_FILE_CHANGED",
        0xC0000198: "NOLOGON_INTERDOMAIN_TRUST_ACCOUNT",
        0xC0000199: "NOLOGON_WORKSTATION_TRUST_ACCOUNT",
        0xC000019A: "NOLOGON_SERVER_TRUST_ACCOUNT",
        0xC000019B: "DOMAIN_TRUST_INCONSISTENT",
        0xC000019C: "FS_DRIVER_REQUIRED",
        0xC000019D: "IMAGE_ALREADY_LOADED_AS_DLL",
        0xC000019E: "INCOMPATIBLE_WITH_GLOBAL_SHORT_NAME_REGISTRY_SETTING",
        0xC000019F: "SHORT_NAMES_NOT_ENABLED_ON_VOLUME",
        0xC00001A0: "SECURITY_STREAM_IS_INCONSISTENT",
        0xC00001A1: "INVALID_LOCK_RANGE",
        0xC00001A2: "INVALID_ACE_CONDITION",
        0xC00001A3: "IMAGE_SUBSYSTEM_NOT_PRESENT",
        0xC00001A4: "NOTIFICATION_GUID_ALREADY_DEFINED",
        0xC00001A5: "INVALID_EXCEPTION_HANDLER",
        0xC00001A6: "DUPLICATE_PRIVILEGES",
        0xC00001A7: "NOT_ALLOWED_ON_SYSTEM_FILE",
        0xC00001A8: "REPAIR_NEEDED",
        0xC00001A9: "QUOTA_NOT_ENABLED",
        0xC00001AA: "NO_APPLICATION_PACKAGE",
        0xC00001AB: "FILE_METADATA_OPTIMIZATION_IN_PROGRESS",
        0xC00001AC: "NOT_SAME_OBJECT",
        0xC00001AD: "FATAL_MEMORY_EXHAUSTION",
        0xC00001AE: "ERROR_PROCESS_NOT_IN_JOB",
        0xC00001AF: "CPU_SET_INVALID",
        0xC00001B0: "IO_DEVICE_INVALID_DATA",
        0xC00001B1: "IO_UNALIGNED_WRITE",
        0xC0000201: "NETWORK_OPEN_RESTRICTION",
        0xC0000202: "NO_USER_SESSION_KEY",
        0xC0000203: "USER_SESSION_DELETED",
        0xC0000204: "RESOURCE_LANG_NOT_FOUND",
        0xC0000205: "INSUFF_SERVER_RESOURCES",
        0xC0000206: "INVALID_BUFFER_SIZE",
        0xC0000207: "INVALID_ADDRESS_COMPONENT",
        0xC0000208: "INVALID_ADDRESS_WILDCARD",
        0xC0000209: "TOO_MANY_ADDRESSES",
        0xC000020A: "ADDRESS_ALREADY_EXISTS",
        0xC000020B: "ADDRESS_CLOSED",
        0xC000020C: "CONNECTION_DISCONNECTED",
        0xC000020D: "CONNECTION_RESET",
        0xC000020E: "TOO_MANY_NODES",
        0xC000020F: "TRANSACTION_ABORTED",
        0xC0000210: "TRANSACTION_TIMED_OUT",
        0xC0000211: "TRANSACTION_NO_RELEASE",
        0xC0000212: "TRANSACTION_NO_MATCH",
        0xC0000213: "TRANSACTION_RESPONDED",
        0xC0000214: "TRANSACTION_INVALID_ID",
        0xC0000215: "TRANSACTION_INVALID_TYPE",
        0xC0000216: "NOT_SERVER_SESSION",
        0xC0000217: "NOT_CLIENT_SESSION",
        0xC0000218: "CANNOT_LOAD_REGISTRY_FILE",
        0xC0000219: "DEBUG_ATTACH_FAILED",
        0xC000021A: "SYSTEM_PROCESS_TERMINATED",
        0xC000021B: "DATA_NOT_ACCEPTED",
        0xC000021C: "NO_BROWSER_SERVERS_FOUND",
        0xC000021D: "VDM_HARD_ERROR",
        0xC000021E: "DRIVER_CANCEL_TIMEOUT",
        0xC000021F: "REPLY_MESSAGE_MISMATCH",
        0xC0000220: "MAPPED_ALIGNMENT",
        0xC0000221: "IMAGE_CHECKSUM_MISMATCH",
        0xC0000222: "LOST_WRITEBEHIND_DATA",
        0xC0000223: "CLIENT_SERVER_PARAMETERS_INVALID",
        0xC0000224: "PASSWORD_MUST_CHANGE",
        0xC0000225: "NOT_FOUND",
        0xC0000226: "NOT_TINY_STREAM",
        0xC0000227: "RECOVERY_FAILURE",
        0xC0000228: "STACK_OVERFLOW_READ",
        0xC0000229: "FAIL_CHECK",
        0xC000022A: "DUPLICATE_OBJECTID",
        0xC000022B: "OBJECTID_EXISTS",
        0xC000022C: "CONVERT_TO_LARGE",
        0xC000022D: "RETRY",
        0xC000022E: "FOUND_OUT_OF_SCOPE",
        0xC000022F: "ALLOCATE_BUCKET",
        0xC0000230: "PROPSET_NOT_FOUND",
        0xC0000231: "MARSHALL_OVERFLOW",
        0xC0000232: "INVALID_VARIANT",
        0xC0000233: "DOMAIN_CONTROLLER_NOT_FOUND",
        0xC0000234: "ACCOUNT_LOCKED_OUT",
        0xC0000235: "HANDLE_NOT_CLOSABLE",
        0xC0000236: "CONNECTION_REFUSED",
        0xC0000237: "GRACEFUL_DISCONNECT",
        0xC0000238: "ADDRESS_ALREADY_ASSOCIATED",
        0xC0000239: "ADDRESS_NOT_ASSOCIATED",
        0xC000023A: "CONNECTION_INVALID",
        0xC000023B: "CONNECTION_ACTIVE",
        0xC000023C: "NETWORK_UNREACHABLE",
        0xC000023D: "HOST_UNREACHABLE",
        0xC000023E: "PROTOCOL_UNREACHABLE",
        0xC000023F: "PORT_UNREACHABLE",
        0xC0000240: "REQUEST_ABORTED",
        0xC0000241: "CONNECTION_ABORTED",
        0xC0000242: "BAD_COMPRESSION_BUFFER",
        0xC0000243: "USER_MAPPED_FILE",
        0xC0000244: "AUDIT_FAILED",
        0xC0000245: "TIMER_RESOLUTION_NOT_SET",
        0xC0000246: "CONNECTION_COUNT_LIMIT",
        0xC0000247: "LOGIN_TIME_RESTRICTION",
        0xC0000248: "LOGIN_WKSTA_RESTRICTION",
        0xC0000249: "IMAGE_MP_UP_MISMATCH",
        0xC0000250: "INSUFFICIENT_LOGON_INFO",
        0xC0000251: "BAD_DLL_ENTRYPOINT",
        0xC0000252: "BAD_SERVICE_ENTRYPOINT",
        0xC0000253: "LPC_REPLY_LOST",
        0xC0000254: "IP_ADDRESS_CONFLICT1",
        0xC0000255: "IP_ADDRESS_CONFLICT2",
        0xC0000256: "REGISTRY_QUOTA_LIMIT",
        0xC0000257: "PATH_NOT_COVERED",
        0xC0000258: "NO_CALLBACK_ACTIVE",
        0xC0000259: "LICENSE_QUOTA_EXCEEDED",
        0xC000025A: "PWD_TOO_SHORT",
        0xC000025B: "PWD_TOO_RECENT",
        0xC000025C: "PWD_HISTORY_CONFLICT",
        0xC000025E: "PLUGPLAY_NO_DEVICE",
        0xC000025F: "UNSUPPORTED_COMPRESSION",
        0xC0000260: "INVALID_HW_PROFILE",
        0xC0000261: "INVALID_PLUGPLAY_DEVICE_PATH",
        0xC0000262: "DRIVER_ORDINAL_NOT_FOUND",
        0xC0000263: "DRIVER_ENTRYPOINT_NOT_FOUND",
        0xC0000264: "RESOURCE_NOT_OWNED",
        0xC0000265: "TOO_MANY_LINKS",
        0xC0000266: "QUOTA_LIST_INCONSISTENT",
        0xC0000267: "FILE_IS_OFFLINE",
        0xC0000268: "EVALUATION_EXPIRATION",
        0xC0000269: "ILLEGAL_DLL_RELOCATION",
        0xC000026A: "LICENSE_VIOLATION",
        0xC000026B: "DLL_INIT_FAILED_LOGOFF",
        0xC000026C: "DRIVER_UNABLE_TO_LOAD",
        0xC000026D: "DFS_UNAVAILABLE",
        0xC000026E: "VOLUME_DISMOUNTED",
        0xC000026F: "WX86_INTERNAL_ERROR",
        0xC0000270: "WX86_FLOAT_STACK_CHECK",
        0xC0000271: "VALIDATE_CONTINUE",
        0xC0000272: "NO_MATCH",
        0xC0000273: "NO_MORE_MATCHES",
        0xC0000275: "NOT_A_REPARSE_POINT",
        0xC0000276: "IO_REPARSE_TAG_INVALID",
        0xC0000277: "IO_REPARSE_TAG_MISMATCH",
        0xC0000278: "IO_REPARSE_DATA_INVALID",
        0xC0000279: "IO_REPARSE_TAG_NOT_HANDLED",
        0xC000027A: "PWD_TOO_LONG",
        0xC000027B: "STOWED_EXCEPTION",
        0xC000027C: "CONTEXT_STOWED_EXCEPTION",
        0xC0000280: "REPARSE_POINT_NOT_RESOLVED",
        0xC0000281: "DIRECTORY_IS_A_REPARSE_POINT",
        0xC0000282: "RANGE_LIST_CONFLICT",
        0xC0000283: "SOURCE_ELEMENT_EMPTY",
        0xC0000284: "DESTINATION_ELEMENT_FULL",
        0xC0000285: "ILLEGAL_ELEMENT_ADDRESS",
        0xC0000286: "MAGAZINE_NOT_PRESENT",
        0xC0000287: "REINITIALIZATION_NEEDED",
        0xC000028A: "ENCRYPTION_FAILED",
        0xC000028B: "DECRYPTION_FAILED",
        0xC000028C: "RANGE_NOT_FOUND",
        0xC000028D: "NO_RECOVERY_POLICY",
        0xC000028E: "NO_EFS",
        0xC000028F: "WRONG_EFS",
        0xC0000290: "NO_USER_KEYS",
        0xC0000291: "FILE_NOT_ENCRYPTED",
        0xC0000292: "NOT_EXPORT_FORMAT",
        0xC0000293: "FILE_ENCRYPTED",
        0xC0000295: "WMI_GUID_NOT_FOUND",
        0xC0000296: "WMI_INSTANCE_NOT_FOUND",
        0xC0000297: "WMI_ITEMID_NOT_FOUND",
        0xC0000298: "WMI_TRY_AGAIN",
        0xC0000299: "SHARED_POLICY",
        0xC000029A: "POLICY_OBJECT_NOT_FOUND",
        0xC000029B: "POLICY_ONLY_IN_DS",
        0xC000029C: "VOLUME_NOT_UPGRADED",
        0xC000029D: "REMOTE_STORAGE_NOT_ACTIVE",
        0xC000029E: "REMOTE_STORAGE_MEDIA_ERROR",
        0xC000029F: "NO_TRACKING_SERVICE",
        0xC00002A0: "SERVER_SID_MISMATCH",
        0xC00002A1: "DS_NO_ATTRIBUTE_OR_VALUE",
        0xC00002A2: "DS_INVALID_ATTRIBUTE_SYNTAX",
        0xC00002A3: "DS_ATTRIBUTE_TYPE_UNDEFINED",
        0xC00002A4: "DS_ATTRIBUTE_OR_VALUE_EXISTS",
        0xC00002A5: "DS_BUSY",
        0xC00002A6: "DS_UNAVAILABLE",
        0xC00002A7: "DS_NO_RIDS_ALLOCATED",
        0xC00002A8: "DS_NO_MORE_RIDS",
        0xC00002A9: "DS_INCORRECT_ROLE_OWNER",
        0xC00002AA: "DS_RIDMGR_INIT_ERROR",
        0xC00002AB: "DS_OBJ_CLASS_VIOLATION",
        0xC00002AC: "DS_CANT_ON_NON_LEAF",
        0xC00002AD: "DS_CANT_ON_RDN",
        0xC00002AE: "DS_CANT_MOD_OBJ_CLASS",
        0xC00002AF: "DS_CROSS_DOM_MOVE_FAILED",
        0xC00002B0: "DS_GC_NOT_AVAILABLE",
        0xC00002B1: "DIRECTORY_SERVICE_REQUIRED",
        0xC00002B2: "REPARSE_ATTRIBUTE_CONFLICT",
        0xC00002B3: "CANT_ENABLE_DENY_ONLY",
        0xC00002B4: "FLOAT_MULTIPLE_FAULTS",
        0xC00002B5: "FLOAT_MULTIPLE_TRAPS",
        0xC00002B6: "DEVICE_REMOVED",
        0xC00002B7: "JOURNAL_DELETE_IN_PROGRESS",
        0xC00002B8: "JOURNAL_NOT_ACTIVE",
        0xC00002B9: "NOINTERFACE",
        0xC00002BA: "DS_RIDMGR_DISABLED",
        0xC00002C1: "DS_ADMIN_LIMIT_EXCEEDED",
        0xC00002C2: "DRIVER_FAILED_SLEEP",
        0xC00002C3: "MUTUAL_AUTHENTICATION_FAILED",
        0xC00002C4: "CORRUPT_SYSTEM_FILE",
        0xC00002C5: "DATATYPE_MISALIGNMENT_ERROR",
        0xC00002C6: "WMI_READ_ONLY",
        0xC00002C7: "WMI_SET_FAILURE",
        0xC00002C8: "COMMITMENT_MINIMUM",
        0xC00002C9: "REG_NAT_CONSUMPTION",
        0xC00002CA: "TRANSPORT_FULL",
        0xC00002CB: "DS_SAM_INIT_FAILURE",
        0xC00002CC: "ONLY_IF_CONNECTED",
        0xC00002CD: "DS_SENSITIVE_GROUP_VIOLATION",
        0xC00002CE: "PNP_RESTART_ENUMERATION",
        0xC00002CF: "JOURNAL_ENTRY_DELETED",
        0xC00002D0: "DS_CANT_MOD_PRIMARYGROUPID",
        0xC00002D1: "SYSTEM_IMAGE_BAD_SIGNATURE",
        0xC00002D2: "PNP_REBOOT_REQUIRED",
        0xC00002D3: "POWER_STATE_INVALID",
        0xC00002D4: "DS_INVALID_GROUP_TYPE",
        0xC00002D5: "DS_NO_NEST_GLOBALGROUP_IN_MIXEDDOMAIN",
        0xC00002D6: "DS_NO_NEST_LOCALGROUP_IN_MIXEDDOMAIN",
        0xC00002D7: "DS_GLOBAL_CANT_HAVE_LOCAL_MEMBER",
        0xC00002D8: "DS_GLOBAL_CANT_HAVE_UNIVERSAL_MEMBER",
        0xC00002D9: "DS_UNIVERSAL_CANT_HAVE_LOCAL_MEMBER",
        0xC00002DA: "DS_GLOBAL_CANT_HAVE_CROSSDOMAIN_MEMBER",
        0xC00002DB: "DS_LOCAL_CANT_HAVE_CROSSDOMAIN_LOCAL_MEMBER",
        0xC00002DC: "DS_HAVE_PRIMARY_MEMBERS",
        0xC00002DD: "WMI_NOT_SUPPORTED",
        0xC00002DE: "INSUFFICIENT_POWER",
        0xC00002DF: "SAM_NEED_BOOTKEY_PASSWORD",
        0xC00002E0: "SAM_NEED_BOOTKEY_FLOPPY",
        0xC00002E1: "DS_CANT_START",
        0xC00002E2: "DS_INIT_FAILURE",
        0xC00002E3: "SAM_INIT_FAILURE",
        0xC00002E4: "DS_GC_REQUIRED",
        0xC00002E5: "DS_LOCAL_MEMBER_OF_LOCAL_ONLY",
        0xC00002E6: "DS_NO_FPO_IN_UNIVERSAL_GROUPS",
        0xC00002E7: "DS_MACHINE_ACCOUNT_QUOTA_EXCEEDED",
        0xC00002E8: "MULTIPLE_FAULT_VIOLATION",
        0xC00002E9: "CURRENT_DOMAIN_NOT_ALLOWED",
        0xC00002EA: "CANNOT_MAKE",
        0xC00002EB: "SYSTEM_SHUTDOWN",
        0xC00002EC: "DS_INIT_FAILURE_CONSOLE",
        0xC00002ED: "DS_SAM_INIT_FAILURE_CONSOLE",
        0xC00002EE: "UNFINISHED_CONTEXT_DELETED",
        0xC00002EF: "NO_TGT_REPLY",
        0xC00002F0: "OBJECTID_NOT_FOUND",
        0xC00002F1: "NO_IP_ADDRESSES",
        0xC00002F2: "WRONG_CREDENTIAL_HANDLE",
        0xC00002F3: "CRYPTO_SYSTEM_INVALID",
        0xC00002F4: "MAX_REFERRALS_EXCEEDED",
        0xC00002F5: "MUST_BE_KDC",
        0xC00002F6: "STRONG_CRYPTO_NOT_SUPPORTED",
        0xC00002F7: "TOO_MANY_PRINCIPALS",
        0xC00002F8: "NO_PA_DATA",
        0xC00002F9: "PKINIT_NAME_MISMATCH",
        0xC00002FA: "SMARTCARD_LOGON_REQUIRED",
        0xC00002FB: "KDC_INVALID_REQUEST",
        0xC00002FC: "KDC_UNABLE_TO_REFER",
        0xC00002FD: "KDC_UNKNOWN_ETYPE",
        0xC00002FE: "SHUTDOWN_IN_PROGRESS",
        0xC00002FF: "SERVER_SHUTDOWN_IN_PROGRESS",
        0xC0000300: "NOT_SUPPORTED_ON_SBS",
        0xC0000301: "WMI_GUID_DISCONNECTED",
        0xC0000302: "WMI_ALREADY_DISABLED",
        0xC0000303: "WMI_ALREADY_ENABLED",
        0xC0000304: "MFT_TOO_FRAGMENTED",
        0xC0000305: "COPY_PROTECTION_FAILURE",
        0xC0000306: "CSS_AUTHENTICATION_FAILURE",
        0xC0000307: "CSS_KEY_NOT_PRESENT",
        0xC0000308: "CSS_KEY_NOT_ESTABLISHED",
        0xC0000309: "CSS_SCRAMBLED_SECTOR",
        0xC000030A: "CSS_REGION_MISMATCH",
        0xC000030B: "CSS_RESETS_EXHAUSTED",
        0xC000030C: "PASSWORD_CHANGE_REQUIRED",
        0xC000030D: "LOST_MODE_LOGON_RESTRICTION",
        0xC0000320: "PKINIT_FAILURE",
        0xC0000321: "SMARTCARD_SUBSYSTEM_FAILURE",
        0xC0000322: "NO_KERB_KEY",
        0xC0000350: "HOST_DOWN",
        0xC0000351: "UNSUPPORTED_PREAUTH",
        0xC0000352: "EFS_ALG_BLOB_TOO_BIG",
        0xC0000353: "PORT_NOT_SET",
        0xC0000354: "DEBUGGER_INACTIVE",
        0xC0000355: "DS_VERSION_CHECK_FAILURE",
        0xC0000356: "AUDITING_DISABLED",
        0xC0000357: "PRENT4_MACHINE_ACCOUNT",
        0xC0000358: "DS_AG_CANT_HAVE_UNIVERSAL_MEMBER",
        0xC0000359: "INVALID_IMAGE_WIN_32",
        0xC000035A: "INVALID_IMAGE_WIN_64",
        0xC000035B: "BAD_BINDINGS",
        0xC000035C: "NETWORK_SESSION_EXPIRED",
        0xC000035D: "APPHELP_BLOCK",
        0xC000035E: "ALL_SIDS_FILTERED",
        0xC000035F: "NOT_SAFE_MODE_DRIVER",
        0xC0000361: "ACCESS_DISABLED_BY_POLICY_DEFAULT",
        0xC0000362: "ACCESS_DISABLED_BY_POLICY_PATH",
        0xC0000363: "ACCESS_DISABLED_BY_POLICY_PUBLISHER",
        0xC0000364: "ACCESS_DISABLED_BY_POLICY_OTHER",
        0xC0000365: "FAILED_DRIVER_ENTRY",
        0xC0000366: "DEVICE_ENUMERATION_ERROR",
        0xC0000368: "MOUNT_POINT_NOT_RESOLVED",
        0xC0000369: "INVALID_DEVICE_OBJECT_PARAMETER",
        0xC000036A: "MCA_OCCURED",
        0xC000036B: "DRIVER_BLOCKED_CRITICAL",
        0xC000036C: "DRIVER_BLOCKED",
        0xC000036D: "DRIVER_DATABASE_ERROR",
        0xC000036E: "SYSTEM_HIVE_TOO_LARGE",
        0xC000036F: "INVALID_IMPORT_OF_NON_DLL",
        0xC0000371: "NO_SECRETS",
        0xC0000372: "ACCESS_DISABLED_NO_SAFER_UI_BY_POLICY",
        0xC0000373: "FAILED_STACK_SWITCH",
        0xC0000374: "HEAP_CORRUPTION",
        0xC0000380: "SMARTCARD_WRONG_PIN",
        0xC0000381: "SMARTCARD_CARD_BLOCKED",
        0xC0000382: "SMARTCARD_CARD_NOT_AUTHENTICATED",
        0xC0000383: "SMARTCARD_NO_CARD",
        0xC0000384: "SMARTCARD_NO_KEY_CONTAINER",
        0xC0000385: "SMARTCARD_NO_CERTIFICATE",
        0xC0000386: "SMARTCARD_NO_KEYSET",
        0xC0000387: "SMARTCARD_IO_ERROR",
        0xC0000388: "DOWNGRADE_DETECTED",
        0xC0000389: "SMARTCARD_CERT_REVOKED",
        0xC000038A: "ISSUING_CA_UNTRUSTED",
        0xC000038B: "REVOCATION_OFFLINE_C",
        0xC000038C: "PKINIT_CLIENT_FAILURE",
        0xC000038D: "SMARTCARD_CERT_EXPIRED",
        0xC000038E: "DRIVER_FAILED_PRIOR_UNLOAD",
        0xC000038F: "SMARTCARD_SILENT_CONTEXT",
        0xC0000401: "PER_USER_TRUST_QUOTA_EXCEEDED",
        0xC0000402: "ALL_USER_TRUST_QUOTA_EXCEEDED",
        0xC0000403: "USER_DELETE_TRUST_QUOTA_EXCEEDED",
        0xC0000404: "DS_NAME_NOT_UNIQUE",
        0xC0000405: "DS_DUPLICATE_ID_FOUND",
        0xC0000406: "DS_GROUP_CONVERSION_ERROR",
        0xC0000407: "VOLSNAP_PREPARE_HIBERNATE",
        0xC0000408: "USER2USER_REQUIRED",
        0xC0000409: "STACK_BUFFER_OVERRUN",
        0xC000040A: "NO_S4U_PROT_SUPPORT",
        0xC000040B: "CROSSREALM_DELEGATION_FAILURE",
        0xC000040C: "REVOCATION_OFFLINE_KDC",
        0xC000040D: "ISSUING_CA_UNTRUSTED_KDC",
        0xC000040E: "KDC_CERT_EXPIRED",
        0xC000040F: "KDC_CERT_REVOKED",
        0xC0000410: "PARAMETER_QUOTA_EXCEEDED",
        0xC0000411: "HIBERNATION_FAILURE",
        0xC0000412: "DELAY_LOAD_FAILED",
        0xC0000413: "AUTHENTICATION_FIREWALL_FAILED",
        0xC0000414: "VDM_DISALLOWED",
        0xC0000415: "HUNG_DISPLAY_DRIVER_THREAD",
        0xC0000416: "INSUFFICIENT_RESOURCE_FOR_SPECIFIED_SHARED_SECTION_SIZE",
        0xC0000417: "INVALID_CRUNTIME_PARAMETER",
        0xC0000418: "NTLM_BLOCKED",
        0xC0000419: "DS_SRC_SID_EXISTS_IN_FOREST",
        0xC000041A: "DS_DOMAIN_NAME_EXISTS_IN_FOREST",
        0xC000041B: "DS_FLAT_NAME_EXISTS_IN_FOREST",
        0xC000041C: "INVALID_USER_PRINCIPAL_NAME",
        0xC000041D: "FATAL_USER_CALLBACK_EXCEPTION",
        0xC0000420: "ASSERTION_FAILURE",
        0xC0000421: "VERIFIER_STOP",
        0xC0000423: "CALLBACK_POP_STACK",
        0xC0000424: "INCOMPATIBLE_DRIVER_BLOCKED",
        0xC0000425: "HIVE_UNLOADED",
        0xC0000426: "COMPRESSION_DISABLED",
        0xC0000427: "FILE_SYSTEM_LIMITATION",
        0xC0000428: "INVALID_IMAGE_HASH",
        0xC0000429: "NOT_CAPABLE",
        0xC000042A: "REQUEST_OUT_OF_SEQUENCE",
        0xC000042B: "IMPLEMENTATION_LIMIT",
        0xC000042C: "ELEVATION_REQUIRED",
        0xC000042D: "NO_SECURITY_CONTEXT",
        0xC000042F: "PKU2U_CERT_FAILURE",
        0xC0000432: "BEYOND_VDL",
        0xC0000433: "ENCOUNTERED_WRITE_IN_PROGRESS",
        0xC0000434: "PTE_CHANGED",
        0xC0000435: "PURGE_FAILED",
        0xC0000440: "CRED_REQUIRES_CONFIRMATION",
        0xC0000441: "CS_ENCRYPTION_INVALID_SERVER_RESPONSE",
        0xC0000442: "CS_ENCRYPTION_UNSUPPORTED_SERVER",
        0xC0000443: "CS_ENCRYPTION_EXISTING_ENCRYPTED_FILE",
        0xC0000444: "CS_ENCRYPTION_NEW_ENCRYPTED_FILE",
        0xC0000445: "CS_ENCRYPTION_FILE_NOT_CSE",
        0xC0000446: "INVALID_LABEL",
        0xC0000450: "DRIVER_PROCESS_TERMINATED",
        0xC0000451: "AMBIGUOUS_SYSTEM_DEVICE",
        0xC0000452: "SYSTEM_DEVICE_NOT_FOUND",
        0xC0000453: "RESTART_BOOT_APPLICATION",
        0xC0000454: "INSUFFICIENT_NVRAM_RESOURCES",
        0xC0000455: "INVALID_SESSION",
        0xC0000456: "THREAD_ALREADY_IN_SESSION",
        0xC0000457: "THREAD_NOT_IN_SESSION",
        0xC0000458: "INVALID_WEIGHT",
        0xC0000459: "REQUEST_PAUSED",
        0xC0000460: "NO_RANGES_PROCESSED",
        0xC0000461: "DISK_RESOURCES_EXHAUSTED",
        0xC0000462: "NEEDS_REMEDIATION",
        0xC0000463: "DEVICE_FEATURE_NOT_SUPPORTED",
        0xC0000464: "DEVICE_UNREACHABLE",
        0xC0000465: "INVALID_TOKEN",
        0xC0000466: "SERVER_UNAVAILABLE",
        0xC0000467: "FILE_NOT_AVAILABLE",
        0xC0000468: "DEVICE_INSUFFICIENT_RESOURCES",
        0xC0000469: "PACKAGE_UPDATING",
        0xC000046A: "NOT_READ_FROM_COPY",
        0xC000046B: "FT_WRITE_FAILURE",
        0xC000046C: "FT_DI_SCAN_REQUIRED",
        0xC000046D: "OBJECT_NOT_EXTERNALLY_BACKED",
        0xC000046E: "EXTERNAL_BACKING_PROVIDER_UNKNOWN",
        0xC000046F: "COMPRESSION_NOT_BENEFICIAL",
        0xC0000470: "DATA_CHECKSUM_ERROR",
        0xC0000471: "INTERMIXED_KERNEL_EA_OPERATION",
        0xC0000472: "TRIM_READ_ZERO_NOT_SUPPORTED",
        0xC0000473: "TOO_MANY_SEGMENT_DESCRIPTORS",
        0xC0000474: "INVALID_OFFSET_ALIGNMENT",
        0xC0000475: "INVALID_FIELD_IN_PARAMETER_LIST",
        0xC0000476: "OPERATION_IN_PROGRESS",
        0xC0000477: "INVALID_INITIATOR_TARGET_PATH",
        0xC0000478: "SCRUB_DATA_DISABLED",
        0xC0000479: "NOT_REDUNDANT_STORAGE",
        0xC000047A: "RESIDENT_FILE_NOT_SUPPORTED",
        0xC000047B: "COMPRESSED_FILE_NOT_SUPPORTED",
        0xC000047C: "DIRECTORY_NOT_SUPPORTED",
        0xC000047D: "IO_OPERATION_TIMEOUT",
        0xC000047E: "SYSTEM_NEEDS_REMEDIATION",
        0xC000047F: "APPX_INTEGRITY_FAILURE_CLR_NGEN",
        0xC0000480: "SHARE_UNAVAILABLE",
        0xC0000481: "APISET_NOT_HOSTED",
        0xC0000482: "APISET_NOT_PRESENT",
        0xC0000483: "DEVICE_HARDWARE_ERROR",
        0xC0000484: "FIRMWARE_SLOT_INVALID",
        0xC0000485: "FIRMWARE_IMAGE_INVALID",
        0xC0000486: "STORAGE_TOPOLOGY_ID_MISMATCH",
        0xC0000487: "WIM_NOT_BOOTABLE",
        0xC0000488: "BLOCKED_BY_PARENTAL_CONTROLS",
        0xC0000489: "NEEDS_REGISTRATION",
        0xC000048A: "QUOTA_ACTIVITY",
        0xC000048B: "CALLBACK_INVOKE_INLINE",
        0xC000048C: "BLOCK_TOO_MANY_REFERENCES",
        0xC000048D: "MARKED_TO_DISALLOW_WRITES",
        0xC000048E: "NETWORK_ACCESS_DENIED_EDP",
        0xC000048F: "ENCLAVE_FAILURE",
        0xC0000490: "PNP_NO_COMPAT_DRIVERS",
        0xC0000491: "PNP_DRIVER_PACKAGE_NOT_FOUND",
        0xC0000492: "PNP_DRIVER_CONFIGURATION_NOT_FOUND",
        0xC0000493: "PNP_DRIVER_CONFIGURATION_INCOMPLETE",
        0xC0000494: "PNP_FUNCTION_DRIVER_REQUIRED",
        0xC0000495: "PNP_DEVICE_CONFIGURATION_PENDING",
        0xC0000496: "DEVICE_HINT_NAME_BUFFER_TOO_SMALL",
        0xC0000497: "PACKAGE_NOT_AVAILABLE",
        0xC0000499: "DEVICE_IN_MAINTENANCE",
        0xC000049A: "NOT_SUPPORTED_ON_DAX",
        0xC000049B: "FREE_SPACE_TOO_FRAGMENTED",
        0xC000049C: "DAX_MAPPING_EXISTS",
        0xC000049D: "CHILD_PROCESS_BLOCKED",
        0xC000049E: "STORAGE_LOST_DATA_PERSISTENCE",
        0xC000049F: "VRF_CFG_ENABLED",
        0xC00004A0: "PARTITION_TERMINATING",
        0xC00004A1: "EXTERNAL_SYSKEY_NOT_SUPPORTED",
        0xC00004A2: "ENCLAVE_VIOLATION",
        0xC00004A3: "FILE_PROTECTED_UNDER_DPL",
        0xC00004A4: "VOLUME_NOT_CLUSTER_ALIGNED",
        0xC00004A5: "NO_PHYSICALLY_ALIGNED_FREE_SPACE_FOUND",
        0xC00004A6: "APPX_FILE_NOT_ENCRYPTED",
        0xC00004A7: "RWRAW_ENCRYPTED_FILE_NOT_ENCRYPTED",
        0xC00004A8: "RWRAW_ENCRYPTED_INVALID_EDATAINFO_FILEOFFSET",
        0xC00004A9: "RWRAW_ENCRYPTED_INVALID_EDATAINFO_FILERANGE",
        0xC00004AA: "RWRAW_ENCRYPTED_INVALID_EDATAINFO_PARAMETER",
        0xC00004AB: "FT_READ_FAILURE",
        0xC00004AC: "PATCH_CONFLICT",
        0xC00004AD: "STORAGE_RESERVE_ID_INVALID",
        0xC00004AE: "STORAGE_RESERVE_DOES_NOT_EXIST",
        0xC00004AF: "STORAGE_RESERVE_ALREADY_EXISTS",
        0xC00004B0: "STORAGE_RESERVE_NOT_EMPTY",
        0xC00004B1: "NOT_A_DAX_VOLUME",
        0xC00004B2: "NOT_DAX_MAPPABLE",
        0xC00004B3: "CASE_DIFFERING_NAMES_IN_DIR",
        0xC00004B4: "FILE_NOT_SUPPORTED",
        0xC00004B5: "NOT_SUPPORTED_WITH_BTT",
        0xC00004B6: "ENCRYPTION_DISABLED",
        0xC00004B7: "ENCRYPTING_METADATA_DISALLOWED",
        0xC00004B8: "CANT_CLEAR_ENCRYPTION_FLAG",
        0xC0000500: "INVALID_TASK_NAME",
        0xC0000501: "INVALID_TASK_INDEX",
        0xC0000502: "THREAD_ALREADY_IN_TASK",
        0xC0000503: "CALLBACK_BYPASS",
        0xC0000504: "UNDEFINED_SCOPE",
        0xC0000505: "INVALID_CAP",
        0xC0000506: "NOT_GUI_PROCESS",
        0xC0000507: "DEVICE_HUNG",
        0xC0000508: "CONTAINER_ASSIGNED",
        0xC0000509: "JOB_NO_CONTAINER",
        0xC000050A: "DEVICE_UNRESPONSIVE",
        0xC000050B: "REPARSE_POINT_ENCOUNTERED",
        0xC000050C: "ATTRIBUTE_NOT_PRESENT",
        0xC000050D: "NOT_A_TIERED_VOLUME",
        0xC000050E: "ALREADY_HAS_STREAM_ID",
        0xC000050F: "JOB_NOT_EMPTY",
        0xC0000510: "ALREADY_INITIALIZED",
        0xC0000511: "ENCLAVE_NOT_TERMINATED",
        0xC0000512: "ENCLAVE_IS_TERMINATING",
        0xC0000513: "SMB1_NOT_AVAILABLE",
        0xC0000514: "SMR_GARBAGE_COLLECTION_REQUIRED",
        0xC0000515: "INTERRUPTED",
        0xC0000516: "THREAD_NOT_RUNNING",
        0xC0000602: "FAIL_FAST_EXCEPTION",
        0xC0000603: "IMAGE_CERT_REVOKED",
        0xC0000604: "DYNAMIC_CODE_BLOCKED",
        0xC0000605: "IMAGE_CERT_EXPIRED",
        0xC0000606: "STRICT_CFG_VIOLATION",
        0xC000060A: "SET_CONTEXT_DENIED",
        0xC000060B: "CROSS_PARTITION_VIOLATION",
        0xC0000700: "PORT_CLOSED",
        0xC0000701: "MESSAGE_LOST",
        0xC0000702: "INVALID_MESSAGE",
        0xC0000703: "REQUEST_CANCELED",
        0xC0000704: "RECURSIVE_DISPATCH",
        0xC0000705: "LPC_RECEIVE_BUFFER_EXPECTED",
        0xC0000706: "LPC_INVALID_CONNECTION_USAGE",
        0xC0000707: "LPC_REQUESTS_NOT_ALLOWED",
        0xC0000708: "RESOURCE_IN_USE",
        0xC0000709: "HARDWARE_MEMORY_ERROR",
        0xC000070A: "THREADPOOL_HANDLE_EXCEPTION",
        0xC000070B: "THREADPOOL_SET_EVENT_ON_COMPLETION_FAILED",
        0xC000070C: "THREADPOOL_RELEASE_SEMAPHORE_ON_COMPLETION_FAILED",
        0xC000070D: "THREADPOOL_RELEASE_MUTEX_ON_COMPLETION_FAILED",
        0xC000070E: "THREADPOOL_FREE_LIBRARY_ON_COMPLETION_FAILED",
        0xC000070F: "THREADPOOL_RELEASED_DURING_OPERATION",
        0xC0000710: "CALLBACK_RETURNED_WHILE_IMPERSONATING",
        0xC0000711: "APC_RETURNED_WHILE_IMPERSONATING",
        0xC0000712: "PROCESS_IS_PROTECTED",
        0xC0000713: "MCA_EXCEPTION",
        0xC0000714: "CERTIFICATE_MAPPING_NOT_UNIQUE",
        0xC0000715: "SYMLINK_CLASS_DISABLED",
        0xC0000716: "INVALID_IDN_NORMALIZATION",
        0xC0000717: "NO_UNICODE_TRANSLATION",
        0xC0000718: "ALREADY_REGISTERED",
        0xC0000719: "CONTEXT_MISMATCH",
        0xC000071A: "PORT_ALREADY_HAS_COMPLETION_LIST",
        0xC000071B: "CALLBACK_RETURNED_THREAD_PRIORITY",
        0xC000071C: "INVALID_THREAD",
        0xC000071D: "CALLBACK_RETURNED_TRANSACTION",
        0xC000071E: "CALLBACK_RETURNED_LDR_LOCK",
        0xC000071F: "CALLBACK_RETURNED_LANG",
        0xC0000720: "CALLBACK_RETURNED_PRI_BACK",
        0xC0000721: "CALLBACK_RETURNED_THREAD_AFFINITY",
        0xC0000722: "LPC_HANDLE_COUNT_EXCEEDED",
        0xC0000723: "EXECUTABLE_MEMORY_WRITE",
        0xC0000724: "KERNEL_EXECUTABLE_MEMORY_WRITE",
        0xC0000725: "ATTACHED_EXECUTABLE_MEMORY_WRITE",
        0xC0000726: "TRIGGERED_EXECUTABLE_MEMORY_WRITE",
        0xC0000800: "DISK_REPAIR_DISABLED",
        0xC0000801: "DS_DOMAIN_RENAME_IN_PROGRESS",
        0xC0000802: "DISK_QUOTA_EXCEEDED",
        0xC0000804: "CONTENT_BLOCKED",
        0xC0000805: "BAD_CLUSTERS",
        0xC0000806: "VOLUME_DIRTY",
        0xC0000808: "DISK_REPAIR_UNSUCCESSFUL",
        0xC0000809: "CORRUPT_LOG_OVERFULL",
        0xC000080A: "CORRUPT_LOG_CORRUPTED",
        0xC000080B: "CORRUPT_LOG_UNAVAILABLE",
        0xC000080C: "CORRUPT_LOG_DELETED_FULL",
        0xC000080D: "CORRUPT_LOG_CLEARED",
        0xC000080E: "ORPHAN_NAME_EXHAUSTED",
        0xC000080F: "PROACTIVE_SCAN_IN_PROGRESS",
        0xC0000810: "ENCRYPTED_IO_NOT_POSSIBLE",
        0xC0000811: "CORRUPT_LOG_UPLEVEL_RECORDS",
        0xC0000901: "FILE_CHECKED_OUT",
        0xC0000902: "CHECKOUT_REQUIRED",
        0xC0000903: "BAD_FILE_TYPE",
        0xC0000904: "FILE_TOO_LARGE",
        0xC0000905: "FORMS_AUTH_REQUIRED",
        0xC0000906: "VIRUS_INFECTED",
        0xC0000907: "VIRUS_DELETED",
        0xC0000908: "BAD_MCFG_TABLE",
        0xC0000909: "CANNOT_BREAK_OPLOCK",
        0xC000090A: "BAD_KEY",
        0xC000090B: "BAD_DATA",
        0xC000090C: "NO_KEY",
        0xC0000910: "FILE_HANDLE_REVOKED",
        0xC0009898: "WOW_ASSERTION",
        0xC000A000: "INVALID_SIGNATURE",
        0xC000A001: "HMAC_NOT_SUPPORTED",
        0xC000A002: "AUTH_TAG_MISMATCH",
        0xC000A003: "INVALID_STATE_TRANSITION",
        0xC000A004: "INVALID_KERNEL_INFO_VERSION",
        0xC000A005: "INVALID_PEP_INFO_VERSION",
        0xC000A006: "HANDLE_REVOKED",
        0xC000A007: "EOF_ON_GHOSTED_RANGE",
        0xC000A010: "IPSEC_QUEUE_OVERFLOW",
        0xC000A011: "ND_QUEUE_OVERFLOW",
        0xC000A012: "HOPLIMIT_EXCEEDED",
        0xC000A013: "PROTOCOL_NOT_SUPPORTED",
        0xC000A014: "FASTPATH_REJECTED",
        0xC000A080: "LOST_WRITEBEHIND_DATA_NETWORK_DISCONNECTED",
        0xC000A081: "LOST_WRITEBEHIND_DATA_NETWORK_SERVER_ERROR",
        0xC000A082: "LOST_WRITEBEHIND_DATA_LOCAL_DISK_ERROR",
        0xC000A083: "XML_PARSE_ERROR",
        0xC000A084: "XMLDSIG_ERROR",
        0xC000A085: "WRONG_COMPARTMENT",
        0xC000A086: "AUTHIP_FAILURE",
        0xC000A087: "DS_OID_MAPPED_GROUP_CANT_HAVE_MEMBERS",
        0xC000A088: "DS_OID_NOT_FOUND",
        0xC000A089: "INCORRECT_ACCOUNT_TYPE",
        0xC000A100: "HASH_NOT_SUPPORTED",
        0xC000A101: "HASH_NOT_PRESENT",
        0xC000A121: "SECONDARY_IC_PROVIDER_NOT_REGISTERED",
        0xC000A122: "GPIO_CLIENT_INFORMATION_INVALID",
        0xC000A123: "GPIO_VERSION_NOT_SUPPORTED",
        0xC000A124: "GPIO_INVALID_REGISTRATION_PACKET",
        0xC000A125: "GPIO_OPERATION_DENIED",
        0xC000A126: "GPIO_INCOMPATIBLE_CONNECT_MODE",
        0xC000A141: "CANNOT_SWITCH_RUNLEVEL",
        0xC000A142: "INVALID_RUNLEVEL_SETTING",
        0xC000A143: "RUNLEVEL_SWITCH_TIMEOUT",
        0xC000A145: "RUNLEVEL_SWITCH_AGENT_TIMEOUT",
        0xC000A146: "RUNLEVEL_SWITCH_IN_PROGRESS",
        0xC000A200: "NOT_APPCONTAINER",
        0xC000A201: "NOT_SUPPORTED_IN_APPCONTAINER",
        0xC000A202: "INVALID_PACKAGE_SID_LENGTH",
        0xC000A203: "LPAC_ACCESS_DENIED",
        0xC000A204: "ADMINLESS_ACCESS_DENIED",
        0xC000A281: "APP_DATA_NOT_FOUND",
        0xC000A282: "APP_DATA_EXPIRED",
        0xC000A283: "APP_DATA_CORRUPT",
        0xC000A284: "APP_DATA_LIMIT_EXCEEDED",
        0xC000A285: "APP_DATA_REBOOT_REQUIRED",
        0xC000A2A1: "OFFLOAD_READ_FLT_NOT_SUPPORTED",
        0xC000A2A2: "OFFLOAD_WRITE_FLT_NOT_SUPPORTED",
        0xC000A2A3: "OFFLOAD_READ_FILE_NOT_SUPPORTED",
        0xC000A2A4: "OFFLOAD_WRITE_FILE_NOT_SUPPORTED",
        0xC000A2A5: "WOF_WIM_HEADER_CORRUPT",
        0xC000A2A6: "WOF_WIM_RESOURCE_TABLE_CORRUPT",
        0xC000A2A7: "WOF_FILE_RESOURCE_TABLE_CORRUPT",
        0xC000CE01: "FILE_SYSTEM_VIRTUALIZATION_UNAVAILABLE",
        0xC000CE02: "FILE_SYSTEM_VIRTUALIZATION_METADATA_CORRUPT",
        0xC000CE03: "FILE_SYSTEM_VIRTUALIZATION_BUSY",
        0xC000CE04: "FILE_SYSTEM_VIRTUALIZATION_PROVIDER_UNKNOWN",
        0xC000CE05: "FILE_SYSTEM_VIRTUALIZATION_INVALID_OPERATION",
        0xC000CF00: "CLOUD_FILE_SYNC_ROOT_METADATA_CORRUPT",
        0xC000CF01: "CLOUD_FILE_PROVIDER_NOT_RUNNING",
        0xC000CF02: "CLOUD_FILE_METADATA_CORRUPT",
        0xC000CF03: "CLOUD_FILE_METADATA_TOO_LARGE",
        0xC000CF06: "CLOUD_FILE_PROPERTY_VERSION_NOT_SUPPORTED",
        0xC000CF07: "NOT_A_CLOUD_FILE",
        0xC000CF08: "CLOUD_FILE_NOT_IN_SYNC",
        0xC000CF09: "CLOUD_FILE_ALREADY_CONNECTED",
        0xC000CF0A: "CLOUD_FILE_NOT_SUPPORTED",
        0xC000CF0B: "CLOUD_FILE_INVALID_REQUEST",
        0xC000CF0C: "CLOUD_FILE_READ_ONLY_VOLUME",
        0xC000CF0D: "CLOUD_FILE_CONNECTED_PROVIDER_ONLY",
        0xC000CF0E: "CLOUD_FILE_VALIDATION_FAILED",
        0xC000CF0F: "CLOUD_FILE_AUTHENTICATION_FAILED",
        0xC000CF10: "CLOUD_FILE_INSUFFICIENT_RESOURCES",
        0xC000CF11: "CLOUD_FILE_NETWORK_UNAVAILABLE",
        0xC000CF12: "CLOUD_FILE_UNSUCCESSFUL",
        0xC000CF13: "CLOUD_FILE_NOT_UNDER_SYNC_ROOT",
        0xC000CF14: "CLOUD_FILE_IN_USE",
        0xC000CF15: "CLOUD_FILE_PINNED",
        0xC000CF16: "CLOUD_FILE_REQUEST_ABORTED",
        0xC000CF17: "CLOUD_FILE_PROPERTY_CORRUPT",
        0xC000CF18: "CLOUD_FILE_ACCESS_DENIED",
        0xC000CF19: "CLOUD_FILE_INCOMPATIBLE_HARDLINKS",
        0xC000CF1A: "CLOUD_FILE_PROPERTY_LOCK_CONFLICT",
        0xC000CF1B: "CLOUD_FILE_REQUEST_CANCELED",
        0xC000CF1D: "CLOUD_FILE_PROVIDER_TERMINATED",
        0xC000CF1E: "NOT_A_CLOUD_SYNC_ROOT",
        0xC000CF1F: "CLOUD_FILE_REQUEST_TIMEOUT",
        0xC0010001: "DBG_NO_STATE_CHANGE",
        0xC0010002: "DBG_APP_NOT_IDLE",
        0xC0020001: "RPC_NT_INVALID_STRING_BINDING",
        0xC0020002: "RPC_NT_WRONG_KIND_OF_BINDING",
        0xC0020003: "RPC_NT_INVALID_BINDING",
        0xC0020004: "RPC_NT_PROTSEQ_NOT_SUPPORTED",
        0xC0020005: "RPC_NT_INVALID_RPC_PROTSEQ",
        0xC0020006: "RPC_NT_INVALID_STRING_UUID",
        0xC0020007: "RPC_NT_INVALID_ENDPOINT_FORMAT",
        0xC0020008: "RPC_NT_INVALID_NET_ADDR",
        0xC0020009: "RPC_NT_NO_ENDPOINT_FOUND",
        0xC002000A: "RPC_NT_INVALID_TIMEOUT",
        0xC002000B: "RPC_NT_OBJECT_NOT_FOUND",
        0xC002000C: "RPC_NT_ALREADY_REGISTERED",
        0xC002000D: "RPC_NT_TYPE_ALREADY_REGISTERED",
        0xC002000E: "RPC_NT_ALREADY_LISTENING",
        0xC002000F: "RPC_NT_NO_PROTSEQS_REGISTERED",
        0xC0020010: "RPC_NT_NOT_LISTENING",
        0xC0020011: "RPC_NT_UNKNOWN_MGR_TYPE",
        0xC0020012: "RPC_NT_UNKNOWN_IF",
        0xC0020013: "RPC_NT_NO_BINDINGS",
        0xC0020014: "RPC_NT_NO_PROTSEQS",
        0xC0020015: "RPC_NT_CANT_CREATE_ENDPOINT",
        0xC0020016: "RPC_NT_OUT_OF_RESOURCES",
        0xC0020017: "RPC_NT_SERVER_UNAVAILABLE",
        0xC0020018: "RPC_NT_SERVER_TOO_BUSY",
        0xC0020019: "RPC_NT_INVALID_NETWORK_OPTIONS",
        0xC002001A: "RPC_NT_NO_CALL_ACTIVE",
        0xC002001B: "RPC_NT_CALL_FAILED",
        0xC002001C: "RPC_NT_CALL_FAILED_DNE",
        0xC002001D: "RPC_NT_PROTOCOL_ERROR",
        0xC002001F: "RPC_NT_UNSUPPORTED_TRANS_SYN",
        0xC0020021: "RPC_NT_UNSUPPORTED_TYPE",
        0xC0020022: "RPC_NT_INVALID_TAG",
        0xC0020023: "RPC_NT_INVALID_BOUND",
        0xC0020024: "RPC_NT_NO_ENTRY_NAME",
        0xC0020025: "RPC_NT_INVALID_NAME_SYNTAX",
        0xC0020026: "RPC_NT_UNSUPPORTED_NAME_SYNTAX",
        0xC0020028: "RPC_NT_UUID_NO_ADDRESS",
        0xC0020029: "RPC_NT_DUPLICATE_ENDPOINT",
        0xC002002A: "RPC_NT_UNKNOWN_AUTHN_TYPE",
        0xC002002B: "RPC_NT_MAX_CALLS_TOO_SMALL",
        0xC002002C: "RPC_NT_STRING_TOO_LONG",
        0xC002002D: "RPC_NT_PROTSEQ_NOT_FOUND",
        0xC002002E: "RPC_NT_PROCNUM_OUT_OF_RANGE",
        0xC002002F: "RPC_NT_BINDING_HAS_NO_AUTH",
        0xC0020030: "RPC_NT_UNKNOWN_AUTHN_SERVICE",
        0xC0020031: "RPC_NT_UNKNOWN_AUTHN_LEVEL",
        0xC0020032: "RPC_NT_INVALID_AUTH_IDENTITY",
        0xC0020033: "RPC_NT_UNKNOWN_AUTHZ_SERVICE",
        0xC0020034: "EPT_NT_INVALID_ENTRY",
        0xC0020035: "EPT_NT_CANT_PERFORM_OP",
        0xC0020036: "EPT_NT_NOT_REGISTERED",
        0xC0020037: "RPC_NT_NOTHING_TO_EXPORT",
        0xC0020038: "RPC_NT_INCOMPLETE_NAME",
        0xC0020039: "RPC_NT_INVALID_VERS_OPTION",
        0xC002003A: "RPC_NT_NO_MORE_MEMBERS",
        0xC002003B: "RPC_NT_NOT_ALL_OBJS_UNEXPORTED",
        0xC002003C: "RPC_NT_INTERFACE_NOT_FOUND",
        0xC002003D: "RPC_NT_ENTRY_ALREADY_EXISTS",
        0xC002003E: "RPC_NT_ENTRY_NOT_FOUND",
        0xC002003F: "RPC_NT_NAME_SERVICE_UNAVAILABLE",
        0xC0020040: "RPC_NT_INVALID_NAF_ID",
        0xC0020041: "RPC_NT_CANNOT_SUPPORT",
        0xC0020042: "RPC_NT_NO_CONTEXT_AVAILABLE",
        0xC0020043: "RPC_NT_INTERNAL_ERROR",
        0xC0020044: "RPC_NT_ZERO_DIVIDE",
        0xC0020045: "RPC_NT_ADDRESS_ERROR",
        0xC0020046: "RPC_NT_FP_DIV_ZERO",
        0xC0020047: "RPC_NT_FP_UNDERFLOW",
        0xC0020048: "RPC_NT_FP_OVERFLOW",
        0xC0020049: "RPC_NT_CALL_IN_PROGRESS",
        0xC002004A: "RPC_NT_NO_MORE_BINDINGS",
        0xC002004B: "RPC_NT_GROUP_MEMBER_NOT_FOUND",
        0xC002004C: "EPT_NT_CANT_CREATE",
        0xC002004D: "RPC_NT_INVALID_OBJECT",
        0xC002004F: "RPC_NT_NO_INTERFACES",
        0xC0020050: "RPC_NT_CALL_CANCELLED",
        0xC0020051: "RPC_NT_BINDING_INCOMPLETE",
        0xC0020052: "RPC_NT_COMM_FAILURE",
        0xC0020053: "RPC_NT_UNSUPPORTED_AUTHN_LEVEL",
        0xC0020054: "RPC_NT_NO_PRINC_NAME",
        0xC0020055: "RPC_NT_NOT_RPC_ERROR",
        0xC0020057: "RPC_NT_SEC_PKG_ERROR",
        0xC0020058: "RPC_NT_NOT_CANCELLED",
        0xC0020062: "RPC_NT_INVALID_ASYNC_HANDLE",
        0xC0020063: "RPC_NT_INVALID_ASYNC_CALL",
        0xC0020064: "RPC_NT_PROXY_ACCESS_DENIED",
        0xC0030001: "RPC_NT_NO_MORE_ENTRIES",
        0xC0030002: "RPC_NT_SS_CHAR_TRANS_OPEN_FAIL",
        0xC0030003: "RPC_NT_SS_CHAR_TRANS_SHORT_FILE",
        0xC0030004: "RPC_NT_SS_IN_NULL_CONTEXT",
        0xC0030005: "RPC_NT_SS_CONTEXT_MISMATCH",
        0xC0030006: "RPC_NT_SS_CONTEXT_DAMAGED",
        0xC0030007: "RPC_NT_SS_HANDLES_MISMATCH",
        0xC0030008: "RPC_NT_SS_CANNOT_GET_CALL_HANDLE",
        0xC0030009: "RPC_NT_NULL_REF_POINTER",
        0xC003000A: "RPC_NT_ENUM_VALUE_OUT_OF_RANGE",
        0xC003000B: "RPC_NT_BYTE_COUNT_TOO_SMALL",
        0xC003000C: "RPC_NT_BAD_STUB_DATA",
        0xC0030059: "RPC_NT_INVALID_ES_ACTION",
        0xC003005A: "RPC_NT_WRONG_ES_VERSION",
        0xC003005B: "RPC_NT_WRONG_STUB_VERSION",
        0xC003005C: "RPC_NT_INVALID_PIPE_OBJECT",
        0xC003005D: "RPC_NT_INVALID_PIPE_OPERATION",
        0xC003005E: "RPC_NT_WRONG_PIPE_VERSION",
        0xC003005F: "RPC_NT_PIPE_CLOSED",
        0xC0030060: "RPC_NT_PIPE_DISCIPLINE_ERROR",
        0xC0030061: "RPC_NT_PIPE_EMPTY",
        0xC0040035: "PNP_BAD_MPS_TABLE",
        0xC0040036: "PNP_TRANSLATION_FAILED",
        0xC0040037: "PNP_IRQ_TRANSLATION_FAILED",
        0xC0040038: "PNP_INVALID_ID",
        0xC0040039: "IO_REISSUE_AS_CACHED",
        0xC00A0001: "CTX_WINSTATION_NAME_INVALID",
        0xC00A0002: "CTX_INVALID_PD",
        0xC00A0003: "CTX_PD_NOT_FOUND",
        0xC00A0006: "CTX_CLOSE_PENDING",
        0xC00A0007: "CTX_NO_OUTBUF",
        0xC00A0008: "CTX_MODEM_INF_NOT_FOUND",
        0xC00A0009: "CTX_INVALID_MODEMNAME",
        0xC00A000A: "CTX_RESPONSE_ERROR",
        0xC00A000B: "CTX_MODEM_RESPONSE_TIMEOUT",
        0xC00A000C: "CTX_MODEM_RESPONSE_NO_CARRIER",
        0xC00A000D: "CTX_MODEM_RESPONSE_NO_DIALTONE",
        0xC00A000E: "CTX_MODEM_RESPONSE_BUSY",
        0xC00A000F: "CTX_MODEM_RESPONSE_VOICE",
        0xC00A0010: "CTX_TD_ERROR",
        0xC00A0012: "CTX_LICENSE_CLIENT_INVALID",
        0xC00A0013: "CTX_LICENSE_NOT_AVAILABLE",
        0xC00A0014: "CTX_LICENSE_EXPIRED",
        0xC00A0015: "CTX_WINSTATION_NOT_FOUND",
        0xC00A0016: "CTX_WINSTATION_NAME_COLLISION",
        0xC00A0017: "CTX_WINSTATION_BUSY",
        0xC00A0018: "CTX_BAD_VIDEO_MODE",
        0xC00A0022: "CTX_GRAPHICS_INVALID",
        0xC00A0024: "CTX_NOT_CONSOLE",
        0xC00A0026: "CTX_CLIENT_QUERY_TIMEOUT",
        0xC00A0027: "CTX_CONSOLE_DISCONNECT",
        0xC00A0028: "CTX_CONSOLE_CONNECT",
        0xC00A002A: "CTX_SHADOW_DENIED",
        0xC00A002B: "CTX_WINSTATION_ACCESS_DENIED",
        0xC00A002E: "CTX_INVALID_WD",
        0xC00A002F: "CTX_WD_NOT_FOUND",
        0xC00A0030: "CTX_SHADOW_INVALID",
        0xC00A0031: "CTX_SHADOW_DISABLED",
        0xC00A0032: "RDP_PROTOCOL_ERROR",
        0xC00A0033: "CTX_CLIENT_LICENSE_NOT_SET",
        0xC00A0034: "CTX_CLIENT_LICENSE_IN_USE",
        0xC00A0035: "CTX_SHADOW_ENDED_BY_MODE_CHANGE",
        0xC00A0036: "CTX_SHADOW_NOT_RUNNING",
        0xC00A0037: "CTX_LOGON_DISABLED",
        0xC00A0038: "CTX_SECURITY_LAYER_ERROR",
        0xC00A0039: "TS_INCOMPATIBLE_SESSIONS",
        0xC00A003A: "TS_VIDEO_SUBSYSTEM_ERROR",
        0xC00B0001: "MUI_FILE_NOT_FOUND",
        0xC00B0002: "MUI_INVALID_FILE",
        0xC00B0003: "MUI_INVALID_RC_CONFIG",
        0xC00B0004: "MUI_INVALID_LOCALE_NAME",
        0xC00B0005: "MUI_INVALID_ULTIMATEFALLBACK_NAME",
        0xC00B0006: "MUI_FILE_NOT_LOADED",
        0xC00B0007: "RESOURCE_ENUM_USER_STOP",
        0xC0130001: "CLUSTER_INVALID_NODE",
        0xC0130002: "CLUSTER_NODE_EXISTS",
        0xC0130003: "CLUSTER_JOIN_IN_PROGRESS",
        0xC0130004: "CLUSTER_NODE_NOT_FOUND",
        0xC0130005: "CLUSTER_LOCAL_NODE_NOT_FOUND",
        0xC0130006: "CLUSTER_NETWORK_EXISTS",
        0xC0130007: "CLUSTER_NETWORK_NOT_FOUND",
        0xC0130008: "CLUSTER_NETINTERFACE_EXISTS",
        0xC0130009: "CLUSTER_NETINTERFACE_NOT_FOUND",
        0xC013000A: "CLUSTER_INVALID_REQUEST",
        0xC013000B: "CLUSTER_INVALID_NETWORK_PROVIDER",
        0xC013000C: "CLUSTER_NODE_DOWN",
        0xC013000D: "CLUSTER_NODE_UNREACHABLE",
        0xC013000E: "CLUSTER_NODE_NOT_MEMBER",
        0xC013000F: "CLUSTER_JOIN_NOT_IN_PROGRESS",
        0xC0130010: "CLUSTER_INVALID_NETWORK",
        0xC0130011: "CLUSTER_NO_NET_ADAPTERS",
        0xC0130012: "CLUSTER_NODE_UP",
        0xC0130013: "CLUSTER_NODE_PAUSED",
        0xC0130014: "CLUSTER_NODE_NOT_PAUSED",
        0xC0130015: "CLUSTER_NO_SECURITY_CONTEXT",
        0xC0130016: "CLUSTER_NETWORK_NOT_INTERNAL",
        0xC0130017: "CLUSTER_POISONED",
        0xC0130018: "CLUSTER_NON_CSV_PATH",
        0xC0130019: "CLUSTER_CSV_VOLUME_NOT_LOCAL",
        0xC0130020: "CLUSTER_CSV_READ_OPLOCK_BREAK_IN_PROGRESS",
        0xC0130021: "CLUSTER_CSV_AUTO_PAUSE_ERROR",
        0xC0130022: "CLUSTER_CSV_REDIRECTED",
        0xC0130023: "CLUSTER_CSV_NOT_REDIRECTED",
        0xC0130024: "CLUSTER_CSV_VOLUME_DRAINING",
        0xC0130025: "CLUSTER_CSV_SNAPSHOT_CREATION_IN_PROGRESS",
        0xC0130026: "CLUSTER_CSV_VOLUME_DRAINING_SUCCEEDED_DOWNLEVEL",
        0xC0130027: "CLUSTER_CSV_NO_SNAPSHOTS",
        0xC0130028: "CSV_IO_PAUSE_TIMEOUT",
        0xC0130029: "CLUSTER_CSV_INVALID_HANDLE",
        0xC0130030: "CLUSTER_CSV_SUPPORTED_ONLY_ON_COORDINATOR",
        0xC0130031: "CLUSTER_CAM_TICKET_REPLAY_DETECTED",
        0xC0140001: "ACPI_INVALID_OPCODE",
        0xC0140002: "ACPI_STACK_OVERFLOW",
        0xC0140003: "ACPI_ASSERT_FAILED",
        0xC0140004: "ACPI_INVALID_INDEX",
        0xC0140005: "ACPI_INVALID_ARGUMENT",
        0xC0140006: "ACPI_FATAL",
        0xC0140007: "ACPI_INVALID_SUPERNAME",
        0xC0140008: "ACPI_INVALID_ARGTYPE",
        0xC0140009: "ACPI_INVALID_OBJTYPE",
        0xC014000A: "ACPI_INVALID_TARGETTYPE",
        0xC014000B: "ACPI_INCORRECT_ARGUMENT_COUNT",
        0xC014000C: "ACPI_ADDRESS_NOT_MAPPED",
        0xC014000D: "ACPI_INVALID_EVENTTYPE",
        0xC014000E: "ACPI_HANDLER_COLLISION",
        0xC014000F: "ACPI_INVALID_DATA",
        0xC0140010: "ACPI_INVALID_REGION",
        0xC0140011: "ACPI_INVALID_ACCESS_SIZE",
        0xC0140012: "ACPI_ACQUIRE_GLOBAL_LOCK",
        0xC0140013: "ACPI_ALREADY_INITIALIZED",
        0xC0140014: "ACPI_NOT_INITIALIZED",
        0xC0140015: "ACPI_INVALID_MUTEX_LEVEL",
        0xC0140016: "ACPI_MUTEX_NOT_OWNED",
        0xC0140017: "ACPI_MUTEX_NOT_OWNER",
        0xC0140018: "ACPI_RS_ACCESS",
        0xC0140019: "ACPI_INVALID_TABLE",
        0xC0140020: "ACPI_REG_HANDLER_FAILED",
        0xC0140021: "ACPI_POWER_REQUEST_FAILED",
        0xC0150001: "SXS_SECTION_NOT_FOUND",
        0xC0150002: "SXS_CANT_GEN_ACTCTX",
        0xC0150003: "SXS_INVALID_ACTCTXDATA_FORMAT",
        0xC0150004: "SXS_ASSEMBLY_NOT_FOUND",
        0xC0150005: "SXS_MANIFEST_FORMAT_ERROR",
        0xC0150006: "SXS_MANIFEST_PARSE_ERROR",
        0xC0150007: "SXS_ACTIVATION_CONTEXT_DISABLED",
        0xC0150008: "SXS_KEY_NOT_FOUND",
        0xC0150009: "SXS_VERSION_CONFLICT",
        0xC015000A: "SXS_WRONG_SECTION_TYPE",
        0xC015000B: "SXS_THREAD_QUERIES_DISABLED",
        0xC015000C: "SXS_ASSEMBLY_MISSING",
        0xC015000E: "SXS_PROCESS_DEFAULT_ALREADY_SET",
        0xC015000F: "SXS_EARLY_DEACTIVATION",
        0xC0150010: "SXS_INVALID_DEACTIVATION",
        0xC0150011: "SXS_MULTIPLE_DEACTIVATION",
        0xC0150012: "SXS_SYSTEM_DEFAULT_ACTIVATION_CONTEXT_EMPTY",
        0xC0150013: "SXS_PROCESS_TERMINATION_REQUESTED",
        0xC0150014: "SXS_CORRUPT_ACTIVATION_STACK",
        0xC0150015: "SXS_CORRUPTION",
        0xC0150016: "SXS_INVALID_IDENTITY_ATTRIBUTE_VALUE",
        0xC0150017: "SXS_INVALID_IDENTITY_ATTRIBUTE_NAME",
        0xC0150018: "SXS_IDENTITY_DUPLICATE_ATTRIBUTE",
        0xC0150019: "SXS_IDENTITY_PARSE_ERROR",
        0xC015001A: "SXS_COMPONENT_STORE_CORRUPT",
        0xC015001B: "SXS_FILE_HASH_MISMATCH",
        0xC015001C: "SXS_MANIFEST_IDENTITY_SAME_BUT_CONTENTS_DIFFERENT",
        0xC015001D: "SXS_IDENTITIES_DIFFERENT",
        0xC015001E: "SXS_ASSEMBLY_IS_NOT_A_DEPLOYMENT",
        0xC015001F: "SXS_FILE_NOT_PART_OF_ASSEMBLY",
        0xC0150020: "ADVANCED_INSTALLER_FAILED",
        0xC0150021: "XML_ENCODING_MISMATCH",
        0xC0150022: "SXS_MANIFEST_TOO_BIG",
        0xC0150023: "SXS_SETTING_NOT_REGISTERED",
        0xC0150024: "SXS_TRANSACTION_CLOSURE_INCOMPLETE",
        0xC0150025: "SMI_PRIMITIVE_INSTALLER_FAILED",
        0xC0150026: "GENERIC_COMMAND_FAILED",
        0xC0150027: "SXS_FILE_HASH_MISSING",
        0xC0190001: "TRANSACTIONAL_CONFLICT",
        0xC0190002: "INVALID_TRANSACTION",
        0xC0190003: "TRANSACTION_NOT_ACTIVE",
        0xC0190004: "TM_INITIALIZATION_FAILED",
        0xC0190005: "RM_NOT_ACTIVE",
        0xC0190006: "RM_METADATA_CORRUPT",
        0xC0190007: "TRANSACTION_NOT_JOINED",
        0xC0190008: "DIRECTORY_NOT_RM",
        0xC019000A: "TRANSACTIONS_UNSUPPORTED_REMOTE",
        0xC019000B: "LOG_RESIZE_INVALID_SIZE",
        0xC019000C: "REMOTE_FILE_VERSION_MISMATCH",
        0xC019000F: "CRM_PROTOCOL_ALREADY_EXISTS",
        0xC0190010: "TRANSACTION_PROPAGATION_FAILED",
        0xC0190011: "CRM_PROTOCOL_NOT_FOUND",
        0xC0190012: "TRANSACTION_SUPERIOR_EXISTS",
        0xC0190013: "TRANSACTION_REQUEST_NOT_VALID",
        0xC0190014: "TRANSACTION_NOT_REQUESTED",
        0xC0190015: "TRANSACTION_ALREADY_ABORTED",
        0xC0190016: "TRANSACTION_ALREADY_COMMITTED",
        0xC0190017: "TRANSACTION_INVALID_MARSHALL_BUFFER",
        0xC0190018: "CURRENT_TRANSACTION_NOT_VALID",
        0xC0190019: "LOG_GROWTH_FAILED",
        0xC0190021: "OBJECT_NO_LONGER_EXISTS",
        0xC0190022: "STREAM_MINIVERSION_NOT_FOUND",
        0xC0190023: "STREAM_MINIVERSION_NOT_VALID",
        0xC0190024: "MINIVERSION_INACCESSIBLE_FROM_SPECIFIED_TRANSACTION",
        0xC0190025: "CANT_OPEN_MINIVERSION_WITH_MODIFY_INTENT",
        0xC0190026: "CANT_CREATE_MORE_STREAM_MINIVERSIONS",
        0xC0190028: "HANDLE_NO_LONGER_VALID",
        0xC0190030: "LOG_CORRUPTION_DETECTED",
        0xC0190032: "RM_DISCONNECTED",
        0xC0190033: "ENLISTMENT_NOT_SUPERIOR",
        0xC0190036: "FILE_IDENTITY_NOT_PERSISTENT",
        0xC0190037: "CANT_BREAK_TRANSACTIONAL_DEPENDENCY",
        0xC0190038: "CANT_CROSS_RM_BOUNDARY",
        0xC0190039: "TXF_DIR_NOT_EMPTY",
        0xC019003A: "INDOUBT_TRANSACTIONS_EXIST",
        0xC019003B: "TM_VOLATILE",
        0xC019003C: "ROLLBACK_TIMER_EXPIRED",
        0xC019003D: "TXF_ATTRIBUTE_CORRUPT",
        0xC019003E: "EFS_NOT_ALLOWED_IN_TRANSACTION",
        0xC019003F: "TRANSACTIONAL_OPEN_NOT_ALLOWED",
        0xC0190040: "TRANSACTED_MAPPING_UNSUPPORTED_REMOTE",
        0xC0190043: "TRANSACTION_REQUIRED_PROMOTION",
        0xC0190044: "CANNOT_EXECUTE_FILE_IN_TRANSACTION",
        0xC0190045: "TRANSACTIONS_NOT_FROZEN",
        0xC0190046: "TRANSACTION_FREEZE_IN_PROGRESS",
        0xC0190047: "NOT_SNAPSHOT_VOLUME",
        0xC0190048: "NO_SAVEPOINT_WITH_OPEN_FILES",
        0xC0190049: "SPARSE_NOT_ALLOWED_IN_TRANSACTION",
        0xC019004A: "TM_IDENTITY_MISMATCH",
        0xC019004B: "FLOATED_SECTION",
        0xC019004C: "CANNOT_ACCEPT_TRANSACTED_WORK",
        0xC019004D: "CANNOT_ABORT_TRANSACTIONS",
        0xC019004E: "TRANSACTION_NOT_FOUND",
        0xC019004F: "RESOURCEMANAGER_NOT_FOUND",
        0xC0190050: "ENLISTMENT_NOT_FOUND",
        0xC0190051: "TRANSACTIONMANAGER_NOT_FOUND",
        0xC0190052: "TRANSACTIONMANAGER_NOT_ONLINE",
        0xC0190053: "TRANSACTIONMANAGER_RECOVERY_NAME_COLLISION",
        0xC0190054: "TRANSACTION_NOT_ROOT",
        0xC0190055: "TRANSACTION_OBJECT_EXPIRED",
        0xC0190056: "COMPRESSION_NOT_ALLOWED_IN_TRANSACTION",
        0xC0190057: "TRANSACTION_RESPONSE_NOT_ENLISTED",
        0xC0190058: "TRANSACTION_RECORD_TOO_LONG",
        0xC0190059: "NO_LINK_TRACKING_IN_TRANSACTION",
        0xC019005A: "OPERATION_NOT_SUPPORTED_IN_TRANSACTION",
        0xC019005B: "TRANSACTION_INTEGRITY_VIOLATED",
        0xC019005C: "TRANSACTIONMANAGER_IDENTITY_MISMATCH",
        0xC019005D: "RM_CANNOT_BE_FROZEN_FOR_SNAPSHOT",
        0xC019005E: "TRANSACTION_MUST_WRITETHROUGH",
        0xC019005F: "TRANSACTION_NO_SUPERIOR",
        0xC0190060: "EXPIRED_HANDLE",
        0xC0190061: "TRANSACTION_NOT_ENLISTED",
        0xC01A0001: "LOG_SECTOR_INVALID",
        0xC01A0002: "LOG_SECTOR_PARITY_INVALID",
        0xC01A0003: "LOG_SECTOR_REMAPPED",
        0xC01A0004: "LOG_BLOCK_INCOMPLETE",
        0xC01A0005: "LOG_INVALID_RANGE",
        0xC01A0006: "LOG_BLOCKS_EXHAUSTED",
        0xC01A0007: "LOG_READ_CONTEXT_INVALID",
        0xC01A0008: "LOG_RESTART_INVALID",
        0xC01A0009: "LOG_BLOCK_VERSION",
        0xC01A000A: "LOG_BLOCK_INVALID",
        0xC01A000B: "LOG_READ_MODE_INVALID",
        0xC01A000D: "LOG_METADATA_CORRUPT",
        0xC01A000E: "LOG_METADATA_INVALID",
        0xC01A000F: "LOG_METADATA_INCONSISTENT",
        0xC01A0010: "LOG_RESERVATION_INVALID",
        0xC01A0011: "LOG_CANT_DELETE",
        0xC01A0012: "LOG_CONTAINER_LIMIT_EXCEEDED",
        0xC01A0013: "LOG_START_OF_LOG",
        0xC01A0014: "LOG_POLICY_ALREADY_INSTALLED",
        0xC01A0015: "LOG_POLICY_NOT_INSTALLED",
        0xC01A0016: "LOG_POLICY_INVALID",
        0xC01A0017: "LOG_POLICY_CONFLICT",
        0xC01A0018: "LOG_PINNED_ARCHIVE_TAIL",
        0xC01A0019: "LOG_RECORD_NONEXISTENT",
        0xC01A001A: "LOG_RECORDS_RESERVED_INVALID",
        0xC01A001B: "LOG_SPACE_RESERVED_INVALID",
        0xC01A001C: "LOG_TAIL_INVALID",
        0xC01A001D: "LOG_FULL",
        0xC01A001E: "LOG_MULTIPLEXED",
        0xC01A001F: "LOG_DEDICATED",
        0xC01A0020: "LOG_ARCHIVE_NOT_IN_PROGRESS",
        0xC01A0021: "LOG_ARCHIVE_IN_PROGRESS",
        0xC01A0022: "LOG_EPHEMERAL",
        0xC01A0023: "LOG_NOT_ENOUGH_CONTAINERS",
        0xC01A0024: "LOG_CLIENT_ALREADY_REGISTERED",
        0xC01A0025: "LOG_CLIENT_NOT_REGISTERED",
        0xC01A0026: "LOG_FULL_HANDLER_IN_PROGRESS",
        0xC01A0027: "LOG_CONTAINER_READ_FAILED",
        0xC01A0028: "LOG_CONTAINER_WRITE_FAILED",
        0xC01A0029: "LOG_CONTAINER_OPEN_FAILED",
        0xC01A002A: "LOG_CONTAINER_STATE_INVALID",
        0xC01A002B: "LOG_STATE_INVALID",
        0xC01A002C: "LOG_PINNED",
        0xC01A002D: "LOG_METADATA_FLUSH_FAILED",
        0xC01A002E: "LOG_INCONSISTENT_SECURITY",
        0xC01A002F: "LOG_APPENDED_FLUSH_FAILED",
        0xC01A0030: "LOG_PINNED_RESERVATION",
        0xC01B00EA: "VIDEO_HUNG_DISPLAY_DRIVER_THREAD",
        0xC01C0001: "FLT_NO_HANDLER_DEFINED",
        0xC01C0002: "FLT_CONTEXT_ALREADY_DEFINED",
        0xC01C0003: "FLT_INVALID_ASYNCHRONOUS_REQUEST",
        0xC01C0004: "FLT_DISALLOW_FAST_IO",
        0xC01C0005: "FLT_INVALID_NAME_REQUEST",
        0xC01C0006: "FLT_NOT_SAFE_TO_POST_OPERATION",
        0xC01C0007: "FLT_NOT_INITIALIZED",
        0xC01C0008: "FLT_FILTER_NOT_READY",
        0xC01C0009: "FLT_POST_OPERATION_CLEANUP",
        0xC01C000A: "FLT_INTERNAL_ERROR",
        0xC01C000B: "FLT_DELETING_OBJECT",
        0xC01C000C: "FLT_MUST_BE_NONPAGED_POOL",
        0xC01C000D: "FLT_DUPLICATE_ENTRY",
        0xC01C000E: "FLT_CBDQ_DISABLED",
        0xC01C000F: "FLT_DO_NOT_ATTACH",
        0xC01C0010: "FLT_DO_NOT_DETACH",
        0xC01C0011: "FLT_INSTANCE_ALTITUDE_COLLISION",
        0xC01C0012: "FLT_INSTANCE_NAME_COLLISION",
        0xC01C0013: "FLT_FILTER_NOT_FOUND",
        0xC01C0014: "FLT_VOLUME_NOT_FOUND",
        0xC01C0015: "FLT_INSTANCE_NOT_FOUND",
        0xC01C0016: "FLT_CONTEXT_ALLOCATION_NOT_FOUND",
        0xC01C0017: "FLT_INVALID_CONTEXT_REGISTRATION",
        0xC01C0018: "FLT_NAME_CACHE_MISS",
        0xC01C0019: "FLT_NO_DEVICE_OBJECT",
        0xC01C001A: "FLT_VOLUME_ALREADY_MOUNTED",
        0xC01C001B: "FLT_ALREADY_ENLISTED",
        0xC01C001C: "FLT_CONTEXT_ALREADY_LINKED",
        0xC01C0020: "FLT_NO_WAITER_FOR_REPLY",
        0xC01C0023: "FLT_REGISTRATION_BUSY",
        0xC01D0001: "MONITOR_NO_DESCRIPTOR",
        0xC01D0002: "MONITOR_UNKNOWN_DESCRIPTOR_FORMAT",
        0xC01D0003: "MONITOR_INVALID_DESCRIPTOR_CHECKSUM",
        0xC01D0004: "MONITOR_INVALID_STANDARD_TIMING_BLOCK",
        0xC01D0005: "MONITOR_WMI_DATABLOCK_REGISTRATION_FAILED",
        0xC01D0006: "MONITOR_INVALID_SERIAL_NUMBER_MONDSC_BLOCK",
        0xC01D0007: "MONITOR_INVALID_USER_FRIENDLY_MONDSC_BLOCK",
        0xC01D0008: "MONITOR_NO_MORE_DESCRIPTOR_DATA",
        0xC01D0009: "MONITOR_INVALID_DETAILED_TIMING_BLOCK",
        0xC01D000A: "MONITOR_INVALID_MANUFACTURE_DATE",
        0xC01E0000: "GRAPHICS_NOT_EXCLUSIVE_MODE_OWNER",
        0xC01E0001: "GRAPHICS_INSUFFICIENT_DMA_BUFFER",
        0xC01E0002: "GRAPHICS_INVALID_DISPLAY_ADAPTER",
        0xC01E0003: "GRAPHICS_ADAPTER_WAS_RESET",
        0xC01E0004: "GRAPHICS_INVALID_DRIVER_MODEL",
        0xC01E0005: "GRAPHICS_PRESENT_MODE_CHANGED",
        0xC01E0006: "GRAPHICS_PRESENT_OCCLUDED",
        0xC01E0007: "GRAPHICS_PRESENT_DENIED",
        0xC01E0008: "GRAPHICS_CANNOTCOLORCONVERT",
        0xC01E0009: "GRAPHICS_DRIVER_MISMATCH",
        0xC01E000B: "GRAPHICS_PRESENT_REDIRECTION_DISABLED",
        0xC01E000C: "GRAPHICS_PRESENT_UNOCCLUDED",
        0xC01E000D: "GRAPHICS_WINDOWDC_NOT_AVAILABLE",
        0xC01E000E: "GRAPHICS_WINDOWLESS_PRESENT_DISABLED",
        0xC01E000F: "GRAPHICS_PRESENT_INVALID_WINDOW",
        0xC01E0010: "GRAPHICS_PRESENT_BUFFER_NOT_BOUND",
        0xC01E0011: "GRAPHICS_VAIL_STATE_CHANGED",
        0xC01E0012: "GRAPHICS_INDIRECT_DISPLAY_ABANDON_SWAPCHAIN",
        0xC01E0013: "GRAPHICS_INDIRECT_DISPLAY_DEVICE_STOPPED",
        0xC01E0100: "GRAPHICS_NO_VIDEO_MEMORY",
        0xC01E0101: "GRAPHICS_CANT_LOCK_MEMORY",
        0xC01E0102: "GRAPHICS_ALLOCATION_BUSY",
        0xC01E0103: "GRAPHICS_TOO_MANY_REFERENCES",
        0xC01E0104: "GRAPHICS_TRY_AGAIN_LATER",
        0xC01E0105: "GRAPHICS_TRY_AGAIN_NOW",
        0xC01E0106: "GRAPHICS_ALLOCATION_INVALID",
        0xC01E0107: "GRAPHICS_UNSWIZZLING_APERTURE_UNAVAILABLE",
        0xC01E0108: "GRAPHICS_UNSWIZZLING_APERTURE_UNSUPPORTED",
        0xC01E0109: "GRAPHICS_CANT_EVICT_PINNED_ALLOCATION",
        0xC01E0110: "GRAPHICS_INVALID_ALLOCATION_USAGE",
        0xC01E0111: "GRAPHICS_CANT_RENDER_LOCKED_ALLOCATION",
        0xC01E0112: "GRAPHICS_ALLOCATION_CLOSED",
        0xC01E0113: "GRAPHICS_INVALID_ALLOCATION_INSTANCE",
        0xC01E0114: "GRAPHICS_INVALID_ALLOCATION_HANDLE",
        0xC01E0115: "GRAPHICS_WRONG_ALLOCATION_DEVICE",
        0xC01E0116: "GRAPHICS_ALLOCATION_CONTENT_LOST",
        0xC01E0200: "GRAPHICS_GPU_EXCEPTION_ON_DEVICE",
        0xC01E0300: "GRAPHICS_INVALID_VIDPN_TOPOLOGY",
        0xC01E0301: "GRAPHICS_VIDPN_TOPOLOGY_NOT_SUPPORTED",
        0xC01E0302: "GRAPHICS_VIDPN_TOPOLOGY_CURRENTLY_NOT_SUPPORTED",
        0xC01E0303: "GRAPHICS_INVALID_VIDPN",
        0xC01E0304: "GRAPHICS_INVALID_VIDEO_PRESENT_SOURCE",
        0xC01E0305: "GRAPHICS_INVALID_VIDEO_PRESENT_TARGET",
        0xC01E0306: "GRAPHICS_VIDPN_MODALITY_NOT_SUPPORTED",
        0xC01E0308: "GRAPHICS_INVALID_VIDPN_SOURCEMODESET",
        0xC01E0309: "GRAPHICS_INVALID_VIDPN_TARGETMODESET",
        0xC01E030A: "GRAPHICS_INVALID_FREQUENCY",
        0xC01E030B: "GRAPHICS_INVALID_ACTIVE_REGION",
        0xC01E030C: "GRAPHICS_INVALID_TOTAL_REGION",
        0xC01E0310: "GRAPHICS_INVALID_VIDEO_PRESENT_SOURCE_MODE",
        0xC01E0311: "GRAPHICS_INVALID_VIDEO_PRESENT_TARGET_MODE",
        0xC01E0312: "GRAPHICS_PINNED_MODE_MUST_REMAIN_IN_SET",
        0xC01E0313: "GRAPHICS_PATH_ALREADY_IN_TOPOLOGY",
        0xC01E0314: "GRAPHICS_MODE_ALREADY_IN_MODESET",
        0xC01E0315: "GRAPHICS_INVALID_VIDEOPRESENTSOURCESET",
        0xC01E0316: "GRAPHICS_INVALID_VIDEOPRESENTTARGETSET",
        0xC01E0317: "GRAPHICS_SOURCE_ALREADY_IN_SET",
        0xC01E0318: "GRAPHICS_TARGET_ALREADY_IN_SET",
        0xC01E0319: "GRAPHICS_INVALID_VIDPN_PRESENT_PATH",
        0xC01E031A: "GRAPHICS_NO_RECOMMENDED_VIDPN_TOPOLOGY",
        0xC01E031B: "GRAPHICS_INVALID_MONITOR_FREQUENCYRANGESET",
        0xC01E031C: "GRAPHICS_INVALID_MONITOR_FREQUENCYRANGE",
        0xC01E031D: "GRAPHICS_FREQUENCYRANGE_NOT_IN_SET",
        0xC01E031F: "GRAPHICS_FREQUENCYRANGE_ALREADY_IN_SET",
        0xC01E0320: "GRAPHICS_STALE_MODESET",
        0xC01E0321: "GRAPHICS_INVALID_MONITOR_SOURCEMODESET",
        0xC01E0322: "GRAPHICS_INVALID_MONITOR_SOURCE_MODE",
        0xC01E0323: "GRAPHICS_NO_RECOMMENDED_FUNCTIONAL_VIDPN",
        0xC01E0324: "GRAPHICS_MODE_ID_MUST_BE_UNIQUE",
        0xC01E0325: "GRAPHICS_EMPTY_ADAPTER_MONITOR_MODE_SUPPORT_INTERSECTION",
        0xC01E0326: "GRAPHICS_VIDEO_PRESENT_TARGETS_LESS_THAN_SOURCES",
        0xC01E0327: "GRAPHICS_PATH_NOT_IN_TOPOLOGY",
        0xC01E0328: "GRAPHICS_ADAPTER_MUST_HAVE_AT_LEAST_ONE_SOURCE",
        0xC01E0329: "GRAPHICS_ADAPTER_MUST_HAVE_AT_LEAST_ONE_TARGET",
        0xC01E032A: "GRAPHICS_INVALID_MONITORDESCRIPTORSET",
        0xC01E032B: "GRAPHICS_INVALID_MONITORDESCRIPTOR",
        0xC01E032C: "GRAPHICS_MONITORDESCRIPTOR_NOT_IN_SET",
        0xC01E032D: "GRAPHICS_MONITORDESCRIPTOR_ALREADY_IN_SET",
        0xC01E032E: "GRAPHICS_MONITORDESCRIPTOR_ID_MUST_BE_UNIQUE",
        0xC01E032F: "GRAPHICS_INVALID_VIDPN_TARGET_SUBSET_TYPE",
        0xC01E0330: "GRAPHICS_RESOURCES_NOT_RELATED",
        0xC01E0331: "GRAPHICS_SOURCE_ID_MUST_BE_UNIQUE",
        0xC01E0332: "GRAPHICS_TARGET_ID_MUST_BE_UNIQUE",
        0xC01E0333: "GRAPHICS_NO_AVAILABLE_VIDPN_TARGET",
        0xC01E0334: "GRAPHICS_MONITOR_COULD_NOT_BE_ASSOCIATED_WITH_ADAPTER",
        0xC01E0335: "GRAPHICS_NO_VIDPNMGR",
        0xC01E0336: "GRAPHICS_NO_ACTIVE_VIDPN",
        0xC01E0337: "GRAPHICS_STALE_VIDPN_TOPOLOGY",
        0xC01E0338: "GRAPHICS_MONITOR_NOT_CONNECTED",
        0xC01E0339: "GRAPHICS_SOURCE_NOT_IN_TOPOLOGY",
        0xC01E033A: "GRAPHICS_INVALID_PRIMARYSURFACE_SIZE",
        0xC01E033B: "GRAPHICS_INVALID_VISIBLEREGION_SIZE",
        0xC01E033C: "GRAPHICS_INVALID_STRIDE",
        0xC01E033D: "GRAPHICS_INVALID_PIXELFORMAT",
        0xC01E033E: "GRAPHICS_INVALID_COLORBASIS",
        0xC01E033F: "GRAPHICS_INVALID_PIXELVALUEACCESSMODE",
        0xC01E0340: "GRAPHICS_TARGET_NOT_IN_TOPOLOGY",
        0xC01E0341: "GRAPHICS_NO_DISPLAY_MODE_MANAGEMENT_SUPPORT",
        0xC01E0342: "GRAPHICS_VIDPN_SOURCE_IN_USE",
        0xC01E0343: "GRAPHICS_CANT_ACCESS_ACTIVE_VIDPN",
        0xC01E0344: "GRAPHICS_INVALID_PATH_IMPORTANCE_ORDINAL",
        0xC01E0345: "GRAPHICS_INVALID_PATH_CONTENT_GEOMETRY_TRANSFORMATION",
        0xC01E0346: "GRAPHICS_PATH_CONTENT_GEOMETRY_TRANSFORMATION_NOT_SUPPORTED",
        0xC01E0347: "GRAPHICS_INVALID_GAMMA_RAMP",
        0xC01E0348: "GRAPHICS_GAMMA_RAMP_NOT_SUPPORTED",
        0xC01E0349: "GRAPHICS_MULTISAMPLING_NOT_SUPPORTED",
        0xC01E034A: "GRAPHICS_MODE_NOT_IN_MODESET",
        0xC01E034D: "GRAPHICS_INVALID_VIDPN_TOPOLOGY_RECOMMENDATION_REASON",
        0xC01E034E: "GRAPHICS_INVALID_PATH_CONTENT_TYPE",
        0xC01E034F: "GRAPHICS_INVALID_COPYPROTECTION_TYPE",
        0xC01E0350: "GRAPHICS_UNASSIGNED_MODESET_ALREADY_EXISTS",
        0xC01E0352: "GRAPHICS_INVALID_SCANLINE_ORDERING",
        0xC01E0353: "GRAPHICS_TOPOLOGY_CHANGES_NOT_ALLOWED",
        0xC01E0354: "GRAPHICS_NO_AVAILABLE_IMPORTANCE_ORDINALS",
        0xC01E0355: "GRAPHICS_INCOMPATIBLE_PRIVATE_FORMAT",
        0xC01E0356: "GRAPHICS_INVALID_MODE_PRUNING_ALGORITHM",
        0xC01E0357: "GRAPHICS_INVALID_MONITOR_CAPABILITY_ORIGIN",
        0xC01E0358: "GRAPHICS_INVALID_MONITOR_FREQUENCYRANGE_CONSTRAINT",
        0xC01E0359: "GRAPHICS_MAX_NUM_PATHS_REACHED",
        0xC01E035A: "GRAPHICS_CANCEL_VIDPN_TOPOLOGY_AUGMENTATION",
        0xC01E035B: "GRAPHICS_INVALID_CLIENT_TYPE",
        0xC01E035C: "GRAPHICS_CLIENTVIDPN_NOT_SET",
        0xC01E0400: "GRAPHICS_SPECIFIED_CHILD_ALREADY_CONNECTED",
        0xC01E0401: "GRAPHICS_CHILD_DESCRIPTOR_NOT_SUPPORTED",
        0xC01E0430: "GRAPHICS_NOT_A_LINKED_ADAPTER",
        0xC01E0431: "GRAPHICS_LEADLINK_NOT_ENUMERATED",
        0xC01E0432: "GRAPHICS_CHAINLINKS_NOT_ENUMERATED",
        0xC01E0433: "GRAPHICS_ADAPTER_CHAIN_NOT_READY",
        0xC01E0434: "GRAPHICS_CHAINLINKS_NOT_STARTED",
        0xC01E0435: "GRAPHICS_CHAINLINKS_NOT_POWERED_ON",
        0xC01E0436: "GRAPHICS_INCONSISTENT_DEVICE_LINK_STATE",
        0xC01E0438: "GRAPHICS_NOT_POST_DEVICE_DRIVER",
        0xC01E043B: "GRAPHICS_ADAPTER_ACCESS_NOT_EXCLUDED",
        0xC01E0500: "GRAPHICS_OPM_NOT_SUPPORTED",
        0xC01E0501: "GRAPHICS_COPP_NOT_SUPPORTED",
        0xC01E0502: "GRAPHICS_UAB_NOT_SUPPORTED",
        0xC01E0503: "GRAPHICS_OPM_INVALID_ENCRYPTED_PARAMETERS",
        0xC01E0505: "GRAPHICS_OPM_NO_PROTECTED_OUTPUTS_EXIST",
        0xC01E050B: "GRAPHICS_OPM_INTERNAL_ERROR",
        0xC01E050C: "GRAPHICS_OPM_INVALID_HANDLE",
        0xC01E050E: "GRAPHICS_PVP_INVALID_CERTIFICATE_LENGTH",
        0xC01E050F: "GRAPHICS_OPM_SPANNING_MODE_ENABLED",
        0xC01E0510: "GRAPHICS_OPM_THEATER_MODE_ENABLED",
        0xC01E0511: "GRAPHICS_PVP_HFS_FAILED",
        0xC01E0512: "GRAPHICS_OPM_INVALID_SRM",
        0xC01E0513: "GRAPHICS_OPM_OUTPUT_DOES_NOT_SUPPORT_HDCP",
        0xC01E0514: "GRAPHICS_OPM_OUTPUT_DOES_NOT_SUPPORT_ACP",
        0xC01E0515: "GRAPHICS_OPM_OUTPUT_DOES_NOT_SUPPORT_CGMSA",
        0xC01E0516: "GRAPHICS_OPM_HDCP_SRM_NEVER_SET",
        0xC01E0517: "GRAPHICS_OPM_RESOLUTION_TOO_HIGH",
        0xC01E0518: "GRAPHICS_OPM_ALL_HDCP_HARDWARE_ALREADY_IN_USE",
        0xC01E051A: "GRAPHICS_OPM_PROTECTED_OUTPUT_NO_LONGER_EXISTS",
        0xC01E051C: "GRAPHICS_OPM_PROTECTED_OUTPUT_DOES_NOT_HAVE_COPP_SEMANTICS",
        0xC01E051D: "GRAPHICS_OPM_INVALID_INFORMATION_REQUEST",
        0xC01E051E: "GRAPHICS_OPM_DRIVER_INTERNAL_ERROR",
        0xC01E051F: "GRAPHICS_OPM_PROTECTED_OUTPUT_DOES_NOT_HAVE_OPM_SEMANTICS",
        0xC01E0520: "GRAPHICS_OPM_SIGNALING_NOT_SUPPORTED",
        0xC01E0521: "GRAPHICS_OPM_INVALID_CONFIGURATION_REQUEST",
        0xC01E0580: "GRAPHICS_I2C_NOT_SUPPORTED",
        0xC01E0581: "GRAPHICS_I2C_DEVICE_DOES_NOT_EXIST",
        0xC01E0582: "GRAPHICS_I2C_ERROR_TRANSMITTING_DATA",
        0xC01E0583: "GRAPHICS_I2C_ERROR_RECEIVING_DATA",
        0xC01E0584: "GRAPHICS_DDCCI_VCP_NOT_SUPPORTED",
        0xC01E0585: "GRAPHICS_DDCCI_INVALID_DATA",
        0xC01E0586: "GRAPHICS_DDCCI_MONITOR_RETURNED_INVALID_TIMING_STATUS_BYTE",
        0xC01E0587: "GRAPHICS_DDCCI_INVALID_CAPABILITIES_STRING",
        0xC01E0588: "GRAPHICS_MCA_INTERNAL_ERROR",
        0xC01E0589: "GRAPHICS_DDCCI_INVALID_MESSAGE_COMMAND",
        0xC01E058A: "GRAPHICS_DDCCI_INVALID_MESSAGE_LENGTH",
        0xC01E058B: "GRAPHICS_DDCCI_INVALID_MESSAGE_CHECKSUM",
        0xC01E058C: "GRAPHICS_INVALID_PHYSICAL_MONITOR_HANDLE",
        0xC01E058D: "GRAPHICS_MONITOR_NO_LONGER_EXISTS",
        0xC01E05E0: "GRAPHICS_ONLY_CONSOLE_SESSION_SUPPORTED",
        0xC01E05E1: "GRAPHICS_NO_DISPLAY_DEVICE_CORRESPONDS_TO_NAME",
        0xC01E05E2: "GRAPHICS_DISPLAY_DEVICE_NOT_ATTACHED_TO_DESKTOP",
        0xC01E05E3: "GRAPHICS_MIRRORING_DEVICES_NOT_SUPPORTED",
        0xC01E05E4: "GRAPHICS_INVALID_POINTER",
        0xC01E05E5: "GRAPHICS_NO_MONITORS_CORRESPOND_TO_DISPLAY_DEVICE",
        0xC01E05E6: "GRAPHICS_PARAMETER_ARRAY_TOO_SMALL",
        0xC01E05E7: "GRAPHICS_INTERNAL_ERROR",
        0xC01E05E8: "GRAPHICS_SESSION_TYPE_CHANGE_IN_PROGRESS",
        0xC0210000: "FVE_LOCKED_VOLUME",
        0xC0210001: "FVE_NOT_ENCRYPTED",
        0xC0210002: "FVE_BAD_INFORMATION",
        0xC0210003: "FVE_TOO_SMALL",
        0xC0210004: "FVE_FAILED_WRONG_FS",
        0xC0210005: "FVE_BAD_PARTITION_SIZE",
        0xC0210006: "FVE_FS_NOT_EXTENDED",
        0xC0210007: "FVE_FS_MOUNTED",
        0xC0210008: "FVE_NO_LICENSE",
        0xC0210009: "FVE_ACTION_NOT_ALLOWED",
        0xC021000A: "FVE_BAD_DATA",
        0xC021000B: "FVE_VOLUME_NOT_BOUND",
        0xC021000C: "FVE_NOT_DATA_VOLUME",
        0xC021000D: "FVE_CONV_READ_ERROR",
        0xC021000E: "FVE_CONV_WRITE_ERROR",
        0xC021000F: "FVE_OVERLAPPED_UPDATE",
        0xC0210010: "FVE_FAILED_SECTOR_SIZE",
        0xC0210011: "FVE_FAILED_AUTHENTICATION",
        0xC0210012: "FVE_NOT_OS_VOLUME",
        0xC0210013: "FVE_KEYFILE_NOT_FOUND",
        0xC0210014: "FVE_KEYFILE_INVALID",
        0xC0210015: "FVE_KEYFILE_NO_VMK",
        0xC0210016: "FVE_TPM_DISABLED",
        0xC0210017: "FVE_TPM_SRK_AUTH_NOT_ZERO",
        0xC0210018: "FVE_TPM_INVALID_PCR",
        0xC0210019: "FVE_TPM_NO_VMK",
        0xC021001A: "FVE_PIN_INVALID",
        0xC021001B: "FVE_AUTH_INVALID_APPLICATION",
        0xC021001C: "FVE_AUTH_INVALID_CONFIG",
        0xC021001D: "FVE_DEBUGGER_ENABLED",
        0xC021001E: "FVE_DRY_RUN_FAILED",
        0xC021001F: "FVE_BAD_METADATA_POINTER",
        0xC0210020: "FVE_OLD_METADATA_COPY",
        0xC0210021: "FVE_REBOOT_REQUIRED",
        0xC0210022: "FVE_RAW_ACCESS",
        0xC0210023: "FVE_RAW_BLOCKED",
        0xC0210024: "FVE_NO_AUTOUNLOCK_MASTER_KEY",
        0xC0210025: "FVE_MOR_FAILED",
        0xC0210026: "FVE_NO_FEATURE_LICENSE",
        0xC0210027: "FVE_POLICY_USER_DISABLE_RDV_NOT_ALLOWED",
        0xC0210028: "FVE_CONV_RECOVERY_FAILED",
        0xC0210029: "FVE_VIRTUALIZED_SPACE_TOO_BIG",
        0xC021002A: "FVE_INVALID_DATUM_TYPE",
        0xC0210030: "FVE_VOLUME_TOO_SMALL",
        0xC0210031: "FVE_ENH_PIN_INVALID",
        0xC0210032: "FVE_FULL_ENCRYPTION_NOT_ALLOWED_ON_TP_STORAGE",
        0xC0210033: "FVE_WIPE_NOT_ALLOWED_ON_TP_STORAGE",
        0xC0210034: "FVE_NOT_ALLOWED_ON_CSV_STACK",
        0xC0210035: "FVE_NOT_ALLOWED_ON_CLUSTER",
        0xC0210036: "FVE_NOT_ALLOWED_TO_UPGRADE_WHILE_CONVERTING",
        0xC0210037: "FVE_WIPE_CANCEL_NOT_APPLICABLE",
        0xC0210038: "FVE_EDRIVE_DRY_RUN_FAILED",
        0xC0210039: "FVE_SECUREBOOT_DISABLED",
        0xC021003A: "FVE_SECUREBOOT_CONFIG_CHANGE",
        0xC021003B: "FVE_DEVICE_LOCKEDOUT",
        0xC021003C: "FVE_VOLUME_EXTEND_PREVENTS_EOW_DECRYPT",
        0xC021003D: "FVE_NOT_DE_VOLUME",
        0xC021003E: "FVE_PROTECTION_DISABLED",
        0xC021003F: "FVE_PROTECTION_CANNOT_BE_DISABLED",
        0xC0210040: "FVE_OSV_KSR_NOT_ALLOWED",
        0xC0220001: "FWP_CALLOUT_NOT_FOUND",
        0xC0220002: "FWP_CONDITION_NOT_FOUND",
        0xC0220003: "FWP_FILTER_NOT_FOUND",
        0xC0220004: "FWP_LAYER_NOT_FOUND",
        0xC0220005: "FWP_PROVIDER_NOT_FOUND",
        0xC0220006: "FWP_PROVIDER_CONTEXT_NOT_FOUND",
        0xC0220007: "FWP_SUBLAYER_NOT_FOUND",
        0xC0220008: "FWP_NOT_FOUND",
        0xC0220009: "FWP_ALREADY_EXISTS",
        0xC022000A: "FWP_IN_USE",
        0xC022000B: "FWP_DYNAMIC_SESSION_IN_PROGRESS",
        0xC022000C: "FWP_WRONG_SESSION",
        0xC022000D: "FWP_NO_TXN_IN_PROGRESS",
        0xC022000E: "FWP_TXN_IN_PROGRESS",
        0xC022000F: "FWP_TXN_ABORTED",
        0xC0220010: "FWP_SESSION_ABORTED",
        0xC0220011: "FWP_INCOMPATIBLE_TXN",
        0xC0220012: "FWP_TIMEOUT",
        0xC0220013: "FWP_NET_EVENTS_DISABLED",
        0xC0220014: "FWP_INCOMPATIBLE_LAYER",
        0xC0220015: "FWP_KM_CLIENTS_ONLY",
        0xC0220016: "FWP_LIFETIME_MISMATCH",
        0xC0220017: "FWP_BUILTIN_OBJECT",
        0xC0220018: "FWP_TOO_MANY_CALLOUTS",
        0xC0220019: "FWP_NOTIFICATION_DROPPED",
        0xC022001A: "FWP_TRAFFIC_MISMATCH",
        0xC022001B: "FWP_INCOMPATIBLE_SA_STATE",
        0xC022001C: "FWP_NULL_POINTER",
        0xC022001D: "FWP_INVALID_ENUMERATOR",
        0xC022001E: "FWP_INVALID_FLAGS",
        0xC022001F: "FWP_INVALID_NET_MASK",
        0xC0220020: "FWP_INVALID_RANGE",
        0xC0220021: "FWP_INVALID_INTERVAL",
        0xC0220022: "FWP_ZERO_LENGTH_ARRAY",
        0xC0220023: "FWP_NULL_DISPLAY_NAME",
        0xC0220024: "FWP_INVALID_ACTION_TYPE",
        0xC0220025: "FWP_INVALID_WEIGHT",
        0xC0220026: "FWP_MATCH_TYPE_MISMATCH",
        0xC0220027: "FWP_TYPE_MISMATCH",
        0xC0220028: "FWP_OUT_OF_BOUNDS",
        0xC0220029: "FWP_RESERVED",
        0xC022002A: "FWP_DUPLICATE_CONDITION",
        0xC022002B: "FWP_DUPLICATE_KEYMOD",
        0xC022002C: "FWP_ACTION_INCOMPATIBLE_WITH_LAYER",
        0xC022002D: "FWP_ACTION_INCOMPATIBLE_WITH_SUBLAYER",
        0xC022002E: "FWP_CONTEXT_INCOMPATIBLE_WITH_LAYER",
        0xC022002F: "FWP_CONTEXT_INCOMPATIBLE_WITH_CALLOUT",
        0xC0220030: "FWP_INCOMPATIBLE_AUTH_METHOD",
        0xC0220031: "FWP_INCOMPATIBLE_DH_GROUP",
        0xC0220032: "FWP_EM_NOT_SUPPORTED",
        0xC0220033: "FWP_NEVER_MATCH",
        0xC0220034: "FWP_PROVIDER_CONTEXT_MISMATCH",
        0xC0220035: "FWP_INVALID_PARAMETER",
        0xC0220036: "FWP_TOO_MANY_SUBLAYERS",
        0xC0220037: "FWP_CALLOUT_NOTIFICATION_FAILED",
        0xC0220038: "FWP_INVALID_AUTH_TRANSFORM",
        0xC0220039: "FWP_INVALID_CIPHER_TRANSFORM",
        0xC022003A: "FWP_INCOMPATIBLE_CIPHER_TRANSFORM",
        0xC022003B: "FWP_INVALID_TRANSFORM_COMBINATION",
        0xC022003C: "FWP_DUPLICATE_AUTH_METHOD",
        0xC022003D: "FWP_INVALID_TUNNEL_ENDPOINT",
        0xC022003E: "FWP_L2_DRIVER_NOT_READY",
        0xC022003F: "FWP_KEY_DICTATOR_ALREADY_REGISTERED",
        0xC0220040: "FWP_KEY_DICTATION_INVALID_KEYING_MATERIAL",
        0xC0220041: "FWP_CONNECTIONS_DISABLED",
        0xC0220042: "FWP_INVALID_DNS_NAME",
        0xC0220043: "FWP_STILL_ON",
        0xC0220044: "FWP_IKEEXT_NOT_RUNNING",
        0xC0220100: "FWP_TCPIP_NOT_READY",
        0xC0220101: "FWP_INJECT_HANDLE_CLOSING",
        0xC0220102: "FWP_INJECT_HANDLE_STALE",
        0xC0220103: "FWP_CANNOT_PEND",
        0xC0220104: "FWP_DROP_NOICMP",
        0xC0230002: "NDIS_CLOSING",
        0xC0230004: "NDIS_BAD_VERSION",
        0xC0230005: "NDIS_BAD_CHARACTERISTICS",
        0xC0230006: "NDIS_ADAPTER_NOT_FOUND",
        0xC0230007: "NDIS_OPEN_FAILED",
        0xC0230008: "NDIS_DEVICE_FAILED",
        0xC0230009: "NDIS_MULTICAST_FULL",
        0xC023000A: "NDIS_MULTICAST_EXISTS",
        0xC023000B: "NDIS_MULTICAST_NOT_FOUND",
        0xC023000C: "NDIS_REQUEST_ABORTED",
        0xC023000D: "NDIS_RESET_IN_PROGRESS",
        0xC023000F: "NDIS_INVALID_PACKET",
        0xC0230010: "NDIS_INVALID_DEVICE_REQUEST",
        0xC0230011: "NDIS_ADAPTER_NOT_READY",
        0xC0230014: "NDIS_INVALID_LENGTH",
        0xC0230015: "NDIS_INVALID_DATA",
        0xC0230016: "NDIS_BUFFER_TOO_SHORT",
        0xC0230017: "NDIS_INVALID_OID",
        0xC0230018: "NDIS_ADAPTER_REMOVED",
        0xC0230019: "NDIS_UNSUPPORTED_MEDIA",
        0xC023001A: "NDIS_GROUP_ADDRESS_IN_USE",
        0xC023001B: "NDIS_FILE_NOT_FOUND",
        0xC023001C: "NDIS_ERROR_READING_FILE",
        0xC023001D: "NDIS_ALREADY_MAPPED",
        0xC023001E: "NDIS_RESOURCE_CONFLICT",
        0xC023001F: "NDIS_MEDIA_DISCONNECTED",
        0xC0230022: "NDIS_INVALID_ADDRESS",
        0xC023002A: "NDIS_PAUSED",
        0xC023002B: "NDIS_INTERFACE_NOT_FOUND",
        0xC023002C: "NDIS_UNSUPPORTED_REVISION",
        0xC023002D: "NDIS_INVALID_PORT",
        0xC023002E: "NDIS_INVALID_PORT_STATE",
        0xC023002F: "NDIS_LOW_POWER_STATE",
        0xC0230030: "NDIS_REINIT_REQUIRED",
        0xC0230031: "NDIS_NO_QUEUES",
        0xC02300BB: "NDIS_NOT_SUPPORTED",
        0xC023100F: "NDIS_OFFLOAD_POLICY",
        0xC0231012: "NDIS_OFFLOAD_CONNECTION_REJECTED",
        0xC0231013: "NDIS_OFFLOAD_PATH_REJECTED",
        0xC0232000: "NDIS_DOT11_AUTO_CONFIG_ENABLED",
        0xC0232001: "NDIS_DOT11_MEDIA_IN_USE",
        0xC0232002: "NDIS_DOT11_POWER_STATE_INVALID",
        0xC0232003: "NDIS_PM_WOL_PATTERN_LIST_FULL",
        0xC0232004: "NDIS_PM_PROTOCOL_OFFLOAD_LIST_FULL",
        0xC0232005: "NDIS_DOT11_AP_CHANNEL_CURRENTLY_NOT_AVAILABLE",
        0xC0232006: "NDIS_DOT11_AP_BAND_CURRENTLY_NOT_AVAILABLE",
        0xC0232007: "NDIS_DOT11_AP_CHANNEL_NOT_ALLOWED",
        0xC0232008: "NDIS_DOT11_AP_BAND_NOT_ALLOWED",
        0xC0290000: "TPM_ERROR_MASK",
        0xC0290001: "TPM_AUTHFAIL",
        0xC0290002: "TPM_BADINDEX",
        0xC0290003: "TPM_BAD_PARAMETER",
        0xC0290004: "TPM_AUDITFAILURE",
        0xC0290005: "TPM_CLEAR_DISABLED",
        0xC0290006: "TPM_DEACTIVATED",
        0xC0290007: "TPM_DISABLED",
        0xC0290008: "TPM_DISABLED_CMD",
        0xC0290009: "TPM_FAIL",
        0xC029000A: "TPM_BAD_ORDINAL",
        0xC029000B: "TPM_INSTALL_DISABLED",
        0xC029000C: "TPM_INVALID_KEYHANDLE",
        0xC029000D: "TPM_KEYNOTFOUND",
        0xC029000E: "TPM_INAPPROPRIATE_ENC",
        0xC029000F: "TPM_MIGRATEFAIL",
        0xC0290010: "TPM_INVALID_PCR_INFO",
        0xC0290011: "TPM_NOSPACE",
        0xC0290012: "TPM_NOSRK",
        0xC0290013: "TPM_NOTSEALED_BLOB",
        0xC0290014: "TPM_OWNER_SET",
        0xC0290015: "TPM_RESOURCES",
        0xC0290016: "TPM_SHORTRANDOM",
        0xC0290017: "TPM_SIZE",
        0xC0290018: "TPM_WRONGPCRVAL",
        0xC0290019: "TPM_BAD_PARAM_SIZE",
        0xC029001A: "TPM_SHA_THREAD",
        0xC029001B: "TPM_SHA_ERROR",
        0xC029001C: "TPM_FAILEDSELFTEST",
        0xC029001D: "TPM_AUTH2FAIL",
        0xC029001E: "TPM_BADTAG",
        0xC029001F: "TPM_IOERROR",
        0xC0290020: "TPM_ENCRYPT_ERROR",
        0xC0290021: "TPM_DECRYPT_ERROR",
        0xC0290022: "TPM_INVALID_AUTHHANDLE",
        0xC0290023: "TPM_NO_ENDORSEMENT",
        0xC0290024: "TPM_INVALID_KEYUSAGE",
        0xC0290025: "TPM_WRONG_ENTITYTYPE",
        0xC0290026: "TPM_INVALID_POSTINIT",
        0xC0290027: "TPM_INAPPROPRIATE_SIG",
        0xC0290028: "TPM_BAD_KEY_PROPERTY",
        0xC0290029: "TPM_BAD_MIGRATION",
        0xC029002A: "TPM_BAD_SCHEME",
        0xC029002B: "TPM_BAD_DATASIZE",
        0xC029002C: "TPM_BAD_MODE",
        0xC029002D: "TPM_BAD_PRESENCE",
        0xC029002E: "TPM_BAD_VERSION",
        0xC029002F: "TPM_NO_WRAP_TRANSPORT",
        0xC0290030: "TPM_AUDITFAIL_UNSUCCESSFUL",
        0xC0290031: "TPM_AUDITFAIL_SUCCESSFUL",
        0xC0290032: "TPM_NOTRESETABLE",
        0xC0290033: "TPM_NOTLOCAL",
        0xC0290034: "TPM_BAD_TYPE",
        0xC0290035: "TPM_INVALID_RESOURCE",
        0xC0290036: "TPM_NOTFIPS",
        0xC0290037: "TPM_INVALID_FAMILY",
        0xC0290038: "TPM_NO_NV_PERMISSION",
        0xC0290039: "TPM_REQUIRES_SIGN",
        0xC029003A: "TPM_KEY_NOTSUPPORTED",
        0xC029003B: "TPM_AUTH_CONFLICT",
        0xC029003C: "TPM_AREA_LOCKED",
        0xC029003D: "TPM_BAD_LOCALITY",
        0xC029003E: "TPM_READ_ONLY",
        0xC029003F: "TPM_PER_NOWRITE",
        0xC0290040: "TPM_FAMILYCOUNT",
        0xC0290041: "TPM_WRITE_LOCKED",
        0xC0290042: "TPM_BAD_ATTRIBUTES",
        0xC0290043: "TPM_INVALID_STRUCTURE",
        0xC0290044: "TPM_KEY_OWNER_CONTROL",
        0xC0290045: "TPM_BAD_COUNTER",
        0xC0290046: "TPM_NOT_FULLWRITE",
        0xC0290047: "TPM_CONTEXT_GAP",
        0xC0290048: "TPM_MAXNVWRITES",
        0xC0290049: "TPM_NOOPERATOR",
        0xC029004A: "TPM_RESOURCEMISSING",
        0xC029004B: "TPM_DELEGATE_LOCK",
        0xC029004C: "TPM_DELEGATE_FAMILY",
        0xC029004D: "TPM_DELEGATE_ADMIN",
        0xC029004E: "TPM_TRANSPORT_NOTEXCLUSIVE",
        0xC029004F: "TPM_OWNER_CONTROL",
        0xC0290050: "TPM_DAA_RESOURCES",
        0xC0290051: "TPM_DAA_INPUT_DATA0",
        0xC0290052: "TPM_DAA_INPUT_DATA1",
        0xC0290053: "TPM_DAA_ISSUER_SETTINGS",
        0xC0290054: "TPM_DAA_TPM_SETTINGS",
        0xC0290055: "TPM_DAA_STAGE",
        0xC0290056: "TPM_DAA_ISSUER_VALIDITY",
        0xC0290057: "TPM_DAA_WRONG_W",
        0xC0290058: "TPM_BAD_HANDLE",
        0xC0290059: "TPM_BAD_DELEGATE",
        0xC029005A: "TPM_BADCONTEXT",
        0xC029005B: "TPM_TOOMANYCONTEXTS",
        0xC029005C: "TPM_MA_TICKET_SIGNATURE",
        0xC029005D: "TPM_MA_DESTINATION",
        0xC029005E: "TPM_MA_SOURCE",
        0xC029005F: "TPM_MA_AUTHORITY",
        0xC0290061: "TPM_PERMANENTEK",
        0xC0290062: "TPM_BAD_SIGNATURE",
        0xC0290063: "TPM_NOCONTEXTSPACE",
        0xC0290081: "TPM_20_E_ASYMMETRIC",
        0xC0290082: "TPM_20_E_ATTRIBUTES",
        0xC0290083: "TPM_20_E_HASH",
        0xC0290084: "TPM_20_E_VALUE",
        0xC0290085: "TPM_20_E_HIERARCHY",
        0xC0290087: "TPM_20_E_KEY_SIZE",
        0xC0290088: "TPM_20_E_MGF",
        0xC0290089: "TPM_20_E_MODE",
        0xC029008A: "TPM_20_E_TYPE",
        0xC029008B: "TPM_20_E_HANDLE",
        0xC029008C: "TPM_20_E_KDF",
        0xC029008D: "TPM_20_E_RANGE",
        0xC029008E: "TPM_20_E_AUTH_FAIL",
        0xC029008F: "TPM_20_E_NONCE",
        0xC0290090: "TPM_20_E_PP",
        0xC0290092: "TPM_20_E_SCHEME",
        0xC0290095: "TPM_20_E_SIZE",
        0xC0290096: "TPM_20_E_SYMMETRIC",
        0xC0290097: "TPM_20_E_TAG",
        0xC0290098: "TPM_20_E_SELECTOR",
        0xC029009A: "TPM_20_E_INSUFFICIENT",
        0xC029009B: "TPM_20_E_SIGNATURE",
        0xC029009C: "TPM_20_E_KEY",
        0xC029009D: "TPM_20_E_POLICY_FAIL",
        0xC029009F: "TPM_20_E_INTEGRITY",
        0xC02900A0: "TPM_20_E_TICKET",
        0xC02900A1: "TPM_20_E_RESERVED_BITS",
        0xC02900A2: "TPM_20_E_BAD_AUTH",
        0xC02900A3: "TPM_20_E_EXPIRED",
        0xC02900A4: "TPM_20_E_POLICY_CC",
        0xC02900A5: "TPM_20_E_BINDING",
        0xC02900A6: "TPM_20_E_CURVE",
        0xC02900A7: "TPM_20_E_ECC_POINT",
        0xC0290100: "TPM_20_E_INITIALIZE",
        0xC0290101: "TPM_20_E_FAILURE",
        0xC0290103: "TPM_20_E_SEQUENCE",
        0xC029010B: "TPM_20_E_PRIVATE",
        0xC0290119: "TPM_20_E_HMAC",
        0xC0290120: "TPM_20_E_DISABLED",
        0xC0290121: "TPM_20_E_EXCLUSIVE",
        0xC0290123: "TPM_20_E_ECC_CURVE",
        0xC0290124: "TPM_20_E_AUTH_TYPE",
        0xC0290125: "TPM_20_E_AUTH_MISSING",
        0xC0290126: "TPM_20_E_POLICY",
        0xC0290127: "TPM_20_E_PCR",
        0xC0290128: "TPM_20_E_PCR_CHANGED",
        0xC029012D: "TPM_20_E_UPGRADE",
        0xC029012E: "TPM_20_E_TOO_MANY_CONTEXTS",
        0xC029012F: "TPM_20_E_AUTH_UNAVAILABLE",
        0xC0290130: "TPM_20_E_REBOOT",
        0xC0290131: "TPM_20_E_UNBALANCED",
        0xC0290142: "TPM_20_E_COMMAND_SIZE",
        0xC0290143: "TPM_20_E_COMMAND_CODE",
        0xC0290144: "TPM_20_E_AUTHSIZE",
        0xC0290145: "TPM_20_E_AUTH_CONTEXT",
        0xC0290146: "TPM_20_E_NV_RANGE",
        0xC0290147: "TPM_20_E_NV_SIZE",
        0xC0290148: "TPM_20_E_NV_LOCKED",
        0xC0290149: "TPM_20_E_NV_AUTHORIZATION",
        0xC029014A: "TPM_20_E_NV_UNINITIALIZED",
        0xC029014B: "TPM_20_E_NV_SPACE",
        0xC029014C: "TPM_20_E_NV_DEFINED",
        0xC0290150: "TPM_20_E_BAD_CONTEXT",
        0xC0290151: "TPM_20_E_CPHASH",
        0xC0290152: "TPM_20_E_PARENT",
        0xC0290153: "TPM_20_E_NEEDS_TEST",
        0xC0290154: "TPM_20_E_NO_RESULT",
        0xC0290155: "TPM_20_E_SENSITIVE",
        0xC0290400: "TPM_COMMAND_BLOCKED",
        0xC0290401: "TPM_INVALID_HANDLE",
        0xC0290402: "TPM_DUPLICATE_VHANDLE",
        0xC0290403: "TPM_EMBEDDED_COMMAND_BLOCKED",
        0xC0290404: "TPM_EMBEDDED_COMMAND_UNSUPPORTED",
        0xC0290800: "TPM_RETRY",
        0xC0290801: "TPM_NEEDS_SELFTEST",
        0xC0290802: "TPM_DOING_SELFTEST",
        0xC0290803: "TPM_DEFEND_LOCK_RUNNING",
        0xC0291001: "TPM_COMMAND_CANCELED",
        0xC0291002: "TPM_TOO_MANY_CONTEXTS",
        0xC0291003: "TPM_NOT_FOUND",
        0xC0291004: "TPM_ACCESS_DENIED",
        0xC0291005: "TPM_INSUFFICIENT_BUFFER",
        0xC0291006: "TPM_PPI_FUNCTION_UNSUPPORTED",
        0xC0292000: "PCP_ERROR_MASK",
        0xC0292001: "PCP_DEVICE_NOT_READY",
        0xC0292002: "PCP_INVALID_HANDLE",
        0xC0292003: "PCP_INVALID_PARAMETER",
        0xC0292004: "PCP_FLAG_NOT_SUPPORTED",
        0xC0292005: "PCP_NOT_SUPPORTED",
        0xC0292006: "PCP_BUFFER_TOO_SMALL",
        0xC0292007: "PCP_INTERNAL_ERROR",
        0xC0292008: "PCP_AUTHENTICATION_FAILED",
        0xC0292009: "PCP_AUTHENTICATION_IGNORED",
        0xC029200A: "PCP_POLICY_NOT_FOUND",
        0xC029200B: "PCP_PROFILE_NOT_FOUND",
        0xC029200C: "PCP_VALIDATION_FAILED",
        0xC029200D: "PCP_DEVICE_NOT_FOUND",
        0xC029200E: "PCP_WRONG_PARENT",
        0xC029200F: "PCP_KEY_NOT_LOADED",
        0xC0292010: "PCP_NO_KEY_CERTIFICATION",
        0xC0292011: "PCP_KEY_NOT_FINALIZED",
        0xC0292012: "PCP_ATTESTATION_CHALLENGE_NOT_SET",
        0xC0292013: "PCP_NOT_PCR_BOUND",
        0xC0292014: "PCP_KEY_ALREADY_FINALIZED",
        0xC0292015: "PCP_KEY_USAGE_POLICY_NOT_SUPPORTED",
        0xC0292016: "PCP_KEY_USAGE_POLICY_INVALID",
        0xC0292017: "PCP_SOFT_KEY_ERROR",
        0xC0292018: "PCP_KEY_NOT_AUTHENTICATED",
        0xC0292019: "PCP_KEY_NOT_AIK",
        0xC029201A: "PCP_KEY_NOT_SIGNING_KEY",
        0xC029201B: "PCP_LOCKED_OUT",
        0xC029201C: "PCP_CLAIM_TYPE_NOT_SUPPORTED",
        0xC029201D: "PCP_TPM_VERSION_NOT_SUPPORTED",
        0xC029201E: "PCP_BUFFER_LENGTH_MISMATCH",
        0xC029201F: "PCP_IFX_RSA_KEY_CREATION_BLOCKED",
        0xC0292020: "PCP_TICKET_MISSING",
        0xC0292021: "PCP_RAW_POLICY_NOT_SUPPORTED",
        0xC0292022: "PCP_KEY_HANDLE_INVALIDATED",
        0xC0293002: "RTPM_NO_RESULT",
        0xC0293003: "RTPM_PCR_READ_INCOMPLETE",
        0xC0293004: "RTPM_INVALID_CONTEXT",
        0xC0293005: "RTPM_UNSUPPORTED_CMD",
        0xC0294000: "TPM_ZERO_EXHAUST_ENABLED",
        0xC0350002: "HV_INVALID_HYPERCALL_CODE",
        0xC0350003: "HV_INVALID_HYPERCALL_INPUT",
        0xC0350004: "HV_INVALID_ALIGNMENT",
        0xC0350005: "HV_INVALID_PARAMETER",
        0xC0350006: "HV_ACCESS_DENIED",
        0xC0350007: "HV_INVALID_PARTITION_STATE",
        0xC0350008: "HV_OPERATION_DENIED",
        0xC0350009: "HV_UNKNOWN_PROPERTY",
        0xC035000A: "HV_PROPERTY_VALUE_OUT_OF_RANGE",
        0xC035000B: "HV_INSUFFICIENT_MEMORY",
        0xC035000C: "HV_PARTITION_TOO_DEEP",
        0xC035000D: "HV_INVALID_PARTITION_ID",
        0xC035000E: "HV_INVALID_VP_INDEX",
        0xC0350011: "HV_INVALID_PORT_ID",
        0xC0350012: "HV_INVALID_CONNECTION_ID",
        0xC0350013: "HV_INSUFFICIENT_BUFFERS",
        0xC0350014: "HV_NOT_ACKNOWLEDGED",
        0xC0350015: "HV_INVALID_VP_STATE",
        0xC0350016: "HV_ACKNOWLEDGED",
        0xC0350017: "HV_INVALID_SAVE_RESTORE_STATE",
        0xC0350018: "HV_INVALID_SYNIC_STATE",
        0xC0350019: "HV_OBJECT_IN_USE",
        0xC035001A: "HV_INVALID_PROXIMITY_DOMAIN_INFO",
        0xC035001B: "HV_NO_DATA",
        0xC035001C: "HV_INACTIVE",
        0xC035001D: "HV_NO_RESOURCES",
        0xC035001E: "HV_FEATURE_UNAVAILABLE",
        0xC0350033: "HV_INSUFFICIENT_BUFFER",
        0xC0350038: "HV_INSUFFICIENT_DEVICE_DOMAINS",
        0xC035003C: "HV_CPUID_FEATURE_VALIDATION_ERROR",
        0xC035003D: "HV_CPUID_XSAVE_FEATURE_VALIDATION_ERROR",
        0xC035003E: "HV_PROCESSOR_STARTUP_TIMEOUT",
        0xC035003F: "HV_SMX_ENABLED",
        0xC0350041: "HV_INVALID_LP_INDEX",
        0xC0350050: "HV_INVALID_REGISTER_VALUE",
        0xC0350051: "HV_INVALID_VTL_STATE",
        0xC0350055: "HV_NX_NOT_DETECTED",
        0xC0350057: "HV_INVALID_DEVICE_ID",
        0xC0350058: "HV_INVALID_DEVICE_STATE",
        0xC0350060: "HV_PAGE_REQUEST_INVALID",
        0xC035006F: "HV_INVALID_CPU_GROUP_ID",
        0xC0350070: "HV_INVALID_CPU_GROUP_STATE",
        0xC0350071: "HV_OPERATION_FAILED",
        0xC0350072: "HV_NOT_ALLOWED_WITH_NESTED_VIRT_ACTIVE",
        0xC0350073: "HV_INSUFFICIENT_ROOT_MEMORY",
        0xC0351000: "HV_NOT_PRESENT",
        0xC0360001: "IPSEC_BAD_SPI",
        0xC0360002: "IPSEC_SA_LIFETIME_EXPIRED",
        0xC0360003: "IPSEC_WRONG_SA",
        0xC0360004: "IPSEC_REPLAY_CHECK_FAILED",
        0xC0360005: "IPSEC_INVALID_PACKET",
        0xC0360006: "IPSEC_INTEGRITY_CHECK_FAILED",
        0xC0360007: "IPSEC_CLEAR_TEXT_DROP",
        0xC0360008: "IPSEC_AUTH_FIREWALL_DROP",
        0xC0360009: "IPSEC_THROTTLE_DROP",
        0xC0368000: "IPSEC_DOSP_BLOCK",
        0xC0368001: "IPSEC_DOSP_RECEIVED_MULTICAST",
        0xC0368002: "IPSEC_DOSP_INVALID_PACKET",
        0xC0368003: "IPSEC_DOSP_STATE_LOOKUP_FAILED",
        0xC0368004: "IPSEC_DOSP_MAX_ENTRIES",
        0xC0368005: "IPSEC_DOSP_KEYMOD_NOT_ALLOWED",
        0xC0368006: "IPSEC_DOSP_MAX_PER_IP_RATELIMIT_QUEUES",
        0xC0370001: "VID_DUPLICATE_HANDLER",
        0xC0370002: "VID_TOO_MANY_HANDLERS",
        0xC0370003: "VID_QUEUE_FULL",
        0xC0370004: "VID_HANDLER_NOT_PRESENT",
        0xC0370005: "VID_INVALID_OBJECT_NAME",
        0xC0370006: "VID_PARTITION_NAME_TOO_LONG",
        0xC0370007: "VID_MESSAGE_QUEUE_NAME_TOO_LONG",
        0xC0370008: "VID_PARTITION_ALREADY_EXISTS",
        0xC0370009: "VID_PARTITION_DOES_NOT_EXIST",
        0xC037000A: "VID_PARTITION_NAME_NOT_FOUND",
        0xC037000B: "VID_MESSAGE_QUEUE_ALREADY_EXISTS",
        0xC037000C: "VID_EXCEEDED_MBP_ENTRY_MAP_LIMIT",
        0xC037000D: "VID_MB_STILL_REFERENCED",
        0xC037000E: "VID_CHILD_GPA_PAGE_SET_CORRUPTED",
        0xC037000F: "VID_INVALID_NUMA_SETTINGS",
        0xC0370010: "VID_INVALID_NUMA_NODE_INDEX",
        0xC0370011: "VID_NOTIFICATION_QUEUE_ALREADY_ASSOCIATED",
        0xC0370012: "VID_INVALID_MEMORY_BLOCK_HANDLE",
        0xC0370013: "VID_PAGE_RANGE_OVERFLOW",
        0xC0370014: "VID_INVALID_MESSAGE_QUEUE_HANDLE",
        0xC0370015: "VID_INVALID_GPA_RANGE_HANDLE",
        0xC0370016: "VID_NO_MEMORY_BLOCK_NOTIFICATION_QUEUE",
        0xC0370017: "VID_MEMORY_BLOCK_LOCK_COUNT_EXCEEDED",
        0xC0370018: "VID_INVALID_PPM_HANDLE",
        0xC0370019: "VID_MBPS_ARE_LOCKED",
        0xC037001A: "VID_MESSAGE_QUEUE_CLOSED",
        0xC037001B: "VID_VIRTUAL_PROCESSOR_LIMIT_EXCEEDED",
        0xC037001C: "VID_STOP_PENDING",
        0xC037001D: "VID_INVALID_PROCESSOR_STATE",
        0xC037001E: "VID_EXCEEDED_KM_CONTEXT_COUNT_LIMIT",
        0xC037001F: "VID_KM_INTERFACE_ALREADY_INITIALIZED",
        0xC0370020: "VID_MB_PROPERTY_ALREADY_SET_RESET",
        0xC0370021: "VID_MMIO_RANGE_DESTROYED",
        0xC0370022: "VID_INVALID_CHILD_GPA_PAGE_SET",
        0xC0370023: "VID_RESERVE_PAGE_SET_IS_BEING_USED",
        0xC0370024: "VID_RESERVE_PAGE_SET_TOO_SMALL",
        0xC0370025: "VID_MBP_ALREADY_LOCKED_USING_RESERVED_PAGE",
        0xC0370026: "VID_MBP_COUNT_EXCEEDED_LIMIT",
        0xC0370027: "VID_SAVED_STATE_CORRUPT",
        0xC0370028: "VID_SAVED_STATE_UNRECOGNIZED_ITEM",
        0xC0370029: "VID_SAVED_STATE_INCOMPATIBLE",
        0xC037002A: "VID_VTL_ACCESS_DENIED",
        0xC0380001: "VOLMGR_DATABASE_FULL",
        0xC0380002: "VOLMGR_DISK_CONFIGURATION_CORRUPTED",
        0xC0380003: "VOLMGR_DISK_CONFIGURATION_NOT_IN_SYNC",
        0xC0380004: "VOLMGR_PACK_CONFIG_UPDATE_FAILED",
        0xC0380005: "VOLMGR_DISK_CONTAINS_NON_SIMPLE_VOLUME",
        0xC0380006: "VOLMGR_DISK_DUPLICATE",
        0xC0380007: "VOLMGR_DISK_DYNAMIC",
        0xC0380008: "VOLMGR_DISK_ID_INVALID",
        0xC0380009: "VOLMGR_DISK_INVALID",
        0xC038000A: "VOLMGR_DISK_LAST_VOTER",
        0xC038000B: "VOLMGR_DISK_LAYOUT_INVALID",
        0xC038000C: "VOLMGR_DISK_LAYOUT_NON_BASIC_BETWEEN_BASIC_PARTITIONS",
        0xC038000D: "VOLMGR_DISK_LAYOUT_NOT_CYLINDER_ALIGNED",
        0xC038000E: "VOLMGR_DISK_LAYOUT_PARTITIONS_TOO_SMALL",
        0xC038000F: "VOLMGR_DISK_LAYOUT_PRIMARY_BETWEEN_LOGICAL_PARTITIONS",
        0xC0380010: "VOLMGR_DISK_LAYOUT_TOO_MANY_PARTITIONS",
        0xC0380011: "VOLMGR_DISK_MISSING",
        0xC0380012: "VOLMGR_DISK_NOT_EMPTY",
        0xC0380013: "VOLMGR_DISK_NOT_ENOUGH_SPACE",
        0xC0380014: "VOLMGR_DISK_REVECTORING_FAILED",
        0xC0380015: "VOLMGR_DISK_SECTOR_SIZE_INVALID",
        0xC0380016: "VOLMGR_DISK_SET_NOT_CONTAINED",
        0xC0380017: "VOLMGR_DISK_USED_BY_MULTIPLE_MEMBERS",
        0xC0380018: "VOLMGR_DISK_USED_BY_MULTIPLE_PLEXES",
        0xC0380019: "VOLMGR_DYNAMIC_DISK_NOT_SUPPORTED",
        0xC038001A: "VOLMGR_EXTENT_ALREADY_USED",
        0xC038001B: "VOLMGR_EXTENT_NOT_CONTIGUOUS",
        0xC038001C: "VOLMGR_EXTENT_NOT_IN_PUBLIC_REGION",
        0xC038001D: "VOLMGR_EXTENT_NOT_SECTOR_ALIGNED",
        0xC038001E: "VOLMGR_EXTENT_OVERLAPS_EBR_PARTITION",
        0xC038001F: "VOLMGR_EXTENT_VOLUME_LENGTHS_DO_NOT_MATCH",
        0xC0380020: "VOLMGR_FAULT_TOLERANT_NOT_SUPPORTED",
        0xC0380021: "VOLMGR_INTERLEAVE_LENGTH_INVALID",
        0xC0380022: "VOLMGR_MAXIMUM_REGISTERED_USERS",
        0xC0380023: "VOLMGR_MEMBER_IN_SYNC",
        0xC0380024: "VOLMGR_MEMBER_INDEX_DUPLICATE",
        0xC0380025: "VOLMGR_MEMBER_INDEX_INVALID",
        0xC0380026: "VOLMGR_MEMBER_MISSING",
        0xC0380027: "VOLMGR_MEMBER_NOT_DETACHED",
        0xC0380028: "VOLMGR_MEMBER_REGENERATING",
        0xC0380029: "VOLMGR_ALL_DISKS_FAILED",
        0xC038002A: "VOLMGR_NO_REGISTERED_USERS",
        0xC038002B: "VOLMGR_NO_SUCH_USER",
        0xC038002C: "VOLMGR_NOTIFICATION_RESET",
        0xC038002D: "VOLMGR_NUMBER_OF_MEMBERS_INVALID",
        0xC038002E: "VOLMGR_NUMBER_OF_PLEXES_INVALID",
        0xC038002F: "VOLMGR_PACK_DUPLICATE",
        0xC0380030: "VOLMGR_PACK_ID_INVALID",
        0xC0380031: "VOLMGR_PACK_INVALID",
        0xC0380032: "VOLMGR_PACK_NAME_INVALID",
        0xC0380033: "VOLMGR_PACK_OFFLINE",
        0xC0380034: "VOLMGR_PACK_HAS_QUORUM",
        0xC0380035: "VOLMGR_PACK_WITHOUT_QUORUM",
        0xC0380036: "VOLMGR_PARTITION_STYLE_INVALID",
        0xC0380037: "VOLMGR_PARTITION_UPDATE_FAILED",
        0xC0380038: "VOLMGR_PLEX_IN_SYNC",
        0xC0380039: "VOLMGR_PLEX_INDEX_DUPLICATE",
        0xC038003A: "VOLMGR_PLEX_INDEX_INVALID",
        0xC038003B: "VOLMGR_PLEX_LAST_ACTIVE",
        0xC038003C: "VOLMGR_PLEX_MISSING",
        0xC038003D: "VOLMGR_PLEX_REGENERATING",
        0xC038003E: "VOLMGR_PLEX_TYPE_INVALID",
        0xC038003F: "VOLMGR_PLEX_NOT_RAID5",
        0xC0380040: "VOLMGR_PLEX_NOT_SIMPLE",
        0xC0380041: "VOLMGR_STRUCTURE_SIZE_INVALID",
        0xC0380042: "VOLMGR_TOO_MANY_NOTIFICATION_REQUESTS",
        0xC0380043: "VOLMGR_TRANSACTION_IN_PROGRESS",
        0xC0380044: "VOLMGR_UNEXPECTED_DISK_LAYOUT_CHANGE",
        0xC0380045: "VOLMGR_VOLUME_CONTAINS_MISSING_DISK",
        0xC0380046: "VOLMGR_VOLUME_ID_INVALID",
        0xC0380047: "VOLMGR_VOLUME_LENGTH_INVALID",
        0xC0380048: "VOLMGR_VOLUME_LENGTH_NOT_SECTOR_SIZE_MULTIPLE",
        0xC0380049: "VOLMGR_VOLUME_NOT_MIRRORED",
        0xC038004A: "VOLMGR_VOLUME_NOT_RETAINED",
        0xC038004B: "VOLMGR_VOLUME_OFFLINE",
        0xC038004C: "VOLMGR_VOLUME_RETAINED",
        0xC038004D: "VOLMGR_NUMBER_OF_EXTENTS_INVALID",
        0xC038004E: "VOLMGR_DIFFERENT_SECTOR_SIZE",
        0xC038004F: "VOLMGR_BAD_BOOT_DISK",
        0xC0380050: "VOLMGR_PACK_CONFIG_OFFLINE",
        0xC0380051: "VOLMGR_PACK_CONFIG_ONLINE",
        0xC0380052: "VOLMGR_NOT_PRIMARY_PACK",
        0xC0380053: "VOLMGR_PACK_LOG_UPDATE_FAILED",
        0xC0380054: "VOLMGR_NUMBER_OF_DISKS_IN_PLEX_INVALID",
        0xC0380055: "VOLMGR_NUMBER_OF_DISKS_IN_MEMBER_INVALID",
        0xC0380056: "VOLMGR_VOLUME_MIRRORED",
        0xC0380057: "VOLMGR_PLEX_NOT_SIMPLE_SPANNED",
        0xC0380058: "VOLMGR_NO_VALID_LOG_COPIES",
        0xC0380059: "VOLMGR_PRIMARY_PACK_PRESENT",
        0xC038005A: "VOLMGR_NUMBER_OF_DISKS_INVALID",
        0xC038005B: "VOLMGR_MIRROR_NOT_SUPPORTED",
        0xC038005C: "VOLMGR_RAID5_NOT_SUPPORTED",
        0xC0390002: "BCD_TOO_MANY_ELEMENTS",
        0xC03A0001: "VHD_DRIVE_FOOTER_MISSING",
        0xC03A0002: "VHD_DRIVE_FOOTER_CHECKSUM_MISMATCH",
        0xC03A0003: "VHD_DRIVE_FOOTER_CORRUPT",
        0xC03A0004: "VHD_FORMAT_UNKNOWN",
        0xC03A0005: "VHD_FORMAT_UNSUPPORTED_VERSION",
        0xC03A0006: "VHD_SPARSE_HEADER_CHECKSUM_MISMATCH",
        0xC03A0007: "VHD_SPARSE_HEADER_UNSUPPORTED_VERSION",
        0xC03A0008: "VHD_SPARSE_HEADER_CORRUPT",
        0xC03A0009: "VHD_BLOCK_ALLOCATION_FAILURE",
        0xC03A000A: "VHD_BLOCK_ALLOCATION_TABLE_CORRUPT",
        0xC03A000B: "VHD_INVALID_BLOCK_SIZE",
        0xC03A000C: "VHD_BITMAP_MISMATCH",
        0xC03A000D: "VHD_PARENT_VHD_NOT_FOUND",
        0xC03A000E: "VHD_CHILD_PARENT_ID_MISMATCH",
        0xC03A000F: "VHD_CHILD_PARENT_TIMESTAMP_MISMATCH",
        0xC03A0010: "VHD_METADATA_READ_FAILURE",
        0xC03A0011: "VHD_METADATA_WRITE_FAILURE",
        0xC03A0012: "VHD_INVALID_SIZE",
        0xC03A0013: "VHD_INVALID_FILE_SIZE",
        0xC03A0014: "VIRTDISK_PROVIDER_NOT_FOUND",
        0xC03A0015: "VIRTDISK_NOT_VIRTUAL_DISK",
        0xC03A0016: "VHD_PARENT_VHD_ACCESS_DENIED",
        0xC03A0017: "VHD_CHILD_PARENT_SIZE_MISMATCH",
        0xC03A0018: "VHD_DIFFERENCING_CHAIN_CYCLE_DETECTED",
        0xC03A0019: "VHD_DIFFERENCING_CHAIN_ERROR_IN_PARENT",
        0xC03A001A: "VIRTUAL_DISK_LIMITATION",
        0xC03A001B: "VHD_INVALID_TYPE",
        0xC03A001C: "VHD_INVALID_STATE",
        0xC03A001D: "VIRTDISK_UNSUPPORTED_DISK_SECTOR_SIZE",
        0xC03A001E: "VIRTDISK_DISK_ALREADY_OWNED",
        0xC03A001F: "VIRTDISK_DISK_ONLINE_AND_WRITABLE",
        0xC03A0020: "CTLOG_TRACKING_NOT_INITIALIZED",
        0xC03A0021: "CTLOG_LOGFILE_SIZE_EXCEEDED_MAXSIZE",
        0xC03A0022: "CTLOG_VHD_CHANGED_OFFLINE",
        0xC03A0023: "CTLOG_INVALID_TRACKING_STATE",
        0xC03A0024: "CTLOG_INCONSISTENT_TRACKING_FILE",
        0xC03A0028: "VHD_METADATA_FULL",
        0xC03A0029: "VHD_INVALID_CHANGE_TRACKING_ID",
        0xC03A002A: "VHD_CHANGE_TRACKING_DISABLED",
        0xC03A0030: "VHD_MISSING_CHANGE_TRACKING_INFORMATION",
        0xC03A0031: "VHD_RESIZE_WOULD_TRUNCATE_DATA",
        0xC03A0032: "VHD_COULD_NOT_COMPUTE_MINIMUM_VIRTUAL_SIZE",
        0xC03A0033: "VHD_ALREADY_AT_OR_BELOW_MINIMUM_VIRTUAL_SIZE",
        0xC0400001: "RKF_KEY_NOT_FOUND",
        0xC0400002: "RKF_DUPLICATE_KEY",
        0xC0400003: "RKF_BLOB_FULL",
        0xC0400004: "RKF_STORE_FULL",
        0xC0400005: "RKF_FILE_BLOCKED",
        0xC0400006: "RKF_ACTIVE_KEY",
        0xC0410001: "RDBSS_RESTART_OPERATION",
        0xC0410002: "RDBSS_CONTINUE_OPERATION",
        0xC0410003: "RDBSS_POST_OPERATION",
        0xC0410004: "RDBSS_RETRY_LOOKUP",
        0xC0420001: "BTH_ATT_INVALID_HANDLE",
        0xC0420002: "BTH_ATT_READ_NOT_PERMITTED",
        0xC0420003: "BTH_ATT_WRITE_NOT_PERMITTED",
        0xC0420004: "BTH_ATT_INVALID_PDU",
        0xC0420005: "BTH_ATT_INSUFFICIENT_AUTHENTICATION",
        0xC0420006: "BTH_ATT_REQUEST_NOT_SUPPORTED",
        0xC0420007: "BTH_ATT_INVALID_OFFSET",
        0xC0420008: "BTH_ATT_INSUFFICIENT_AUTHORIZATION",
        0xC0420009: "BTH_ATT_PREPARE_QUEUE_FULL",
        0xC042000A: "BTH_ATT_ATTRIBUTE_NOT_FOUND",
        0xC042000B: "BTH_ATT_ATTRIBUTE_NOT_LONG",
        0xC042000C: "BTH_ATT_INSUFFICIENT_ENCRYPTION_KEY_SIZE",
        0xC042000D: "BTH_ATT_INVALID_ATTRIBUTE_VALUE_LENGTH",
        0xC042000E: "BTH_ATT_UNLIKELY",
        0xC042000F: "BTH_ATT_INSUFFICIENT_ENCRYPTION",
        0xC0420010: "BTH_ATT_UNSUPPORTED_GROUP_TYPE",
        0xC0420011: "BTH_ATT_INSUFFICIENT_RESOURCES",
        0xC0421000: "BTH_ATT_UNKNOWN_ERROR",
        0xC0430001: "SECUREBOOT_ROLLBACK_DETECTED",
        0xC0430002: "SECUREBOOT_POLICY_VIOLATION",
        0xC0430003: "SECUREBOOT_INVALID_POLICY",
        0xC0430004: "SECUREBOOT_POLICY_PUBLISHER_NOT_FOUND",
        0xC0430005: "SECUREBOOT_POLICY_NOT_SIGNED",
        0xC0430007: "SECUREBOOT_FILE_REPLACED",
        0xC0430008: "SECUREBOOT_POLICY_NOT_AUTHORIZED",
        0xC0430009: "SECUREBOOT_POLICY_UNKNOWN",
        0xC043000A: "SECUREBOOT_POLICY_MISSING_ANTIROLLBACKVERSION",
        0xC043000B: "SECUREBOOT_PLATFORM_ID_MISMATCH",
        0xC043000C: "SECUREBOOT_POLICY_ROLLBACK_DETECTED",
        0xC043000D: "SECUREBOOT_POLICY_UPGRADE_MISMATCH",
        0xC043000E: "SECUREBOOT_REQUIRED_POLICY_FILE_MISSING",
        0xC043000F: "SECUREBOOT_NOT_BASE_POLICY",
        0xC0430010: "SECUREBOOT_NOT_SUPPLEMENTAL_POLICY",
        0xC0440001: "AUDIO_ENGINE_NODE_NOT_FOUND",
        0xC0440002: "HDAUDIO_EMPTY_CONNECTION_LIST",
        0xC0440003: "HDAUDIO_CONNECTION_LIST_NOT_SUPPORTED",
        0xC0440004: "HDAUDIO_NO_LOGICAL_DEVICES_CREATED",
        0xC0440005: "HDAUDIO_NULL_LINKED_LIST_ENTRY",
        0xC0450000: "VSM_NOT_INITIALIZED",
        0xC0450001: "VSM_DMA_PROTECTION_NOT_IN_USE",
        0xC0500003: "VOLSNAP_BOOTFILE_NOT_VALID",
        0xC0500004: "VOLSNAP_ACTIVATION_TIMEOUT",
        0xC0510001: "IO_PREEMPTED",
        0xC05C0000: "SVHDX_ERROR_STORED",
        0xC05CFF00: "SVHDX_ERROR_NOT_AVAILABLE",
        0xC05CFF01: "SVHDX_UNIT_ATTENTION_AVAILABLE",
        0xC05CFF02: "SVHDX_UNIT_ATTENTION_CAPACITY_DATA_CHANGED",
        0xC05CFF03: "SVHDX_UNIT_ATTENTION_RESERVATIONS_PREEMPTED",
        0xC05CFF04: "SVHDX_UNIT_ATTENTION_RESERVATIONS_RELEASED",
        0xC05CFF05: "SVHDX_UNIT_ATTENTION_REGISTRATIONS_PREEMPTED",
        0xC05CFF06: "SVHDX_UNIT_ATTENTION_OPERATING_DEFINITION_CHANGED",
        0xC05CFF07: "SVHDX_RESERVATION_CONFLICT",
        0xC05CFF08: "SVHDX_WRONG_FILE_TYPE",
        0xC05CFF09: "SVHDX_VERSION_MISMATCH",
        0xC05CFF0A: "VHD_SHARED",
        0xC05CFF0B: "SVHDX_NO_INITIATOR",
        0xC05CFF0C: "VHDSET_BACKING_STORAGE_NOT_FOUND",
        0xC05D0000: "SMB_NO_PREAUTH_INTEGRITY_HASH_OVERLAP",
        0xC05D0001: "SMB_BAD_CLUSTER_DIALECT",
        0xC05D0002: "SMB_GUEST_LOGON_BLOCKED",
        0xC0E70001: "SPACES_FAULT_DOMAIN_TYPE_INVALID",
        0xC0E70003: "SPACES_RESILIENCY_TYPE_INVALID",
        0xC0E70004: "SPACES_DRIVE_SECTOR_SIZE_INVALID",
        0xC0E70006: "SPACES_DRIVE_REDUNDANCY_INVALID",
        0xC0E70007: "SPACES_NUMBER_OF_DATA_COPIES_INVALID",
        0xC0E70009: "SPACES_INTERLEAVE_LENGTH_INVALID",
        0xC0E7000A: "SPACES_NUMBER_OF_COLUMNS_INVALID",
        0xC0E7000B: "SPACES_NOT_ENOUGH_DRIVES",
        0xC0E7000C: "SPACES_EXTENDED_ERROR",
        0xC0E7000D: "SPACES_PROVISIONING_TYPE_INVALID",
        0xC0E7000E: "SPACES_ALLOCATION_SIZE_INVALID",
        0xC0E7000F: "SPACES_ENCLOSURE_AWARE_INVALID",
        0xC0E70010: "SPACES_WRITE_CACHE_SIZE_INVALID",
        0xC0E70011: "SPACES_NUMBER_OF_GROUPS_INVALID",
        0xC0E70012: "SPACES_DRIVE_OPERATIONAL_STATE_INVALID",
        0xC0E70013: "SPACES_UPDATE_COLUMN_STATE",
        0xC0E70014: "SPACES_MAP_REQUIRED",
        0xC0E70015: "SPACES_UNSUPPORTED_VERSION",
        0xC0E70016: "SPACES_CORRUPT_METADATA",
        0xC0E70017: "SPACES_DRT_FULL",
        0xC0E70018: "SPACES_INCONSISTENCY",
        0xC0E70019: "SPACES_LOG_NOT_READY",
        0xC0E7001A: "SPACES_NO_REDUNDANCY",
        0xC0E7001B: "SPACES_DRIVE_NOT_READY",
        0xC0E7001C: "SPACES_DRIVE_SPLIT",
        0xC0E7001D: "SPACES_DRIVE_LOST_DATA",
        0xC0E7001E: "SPACES_ENTRY_INCOMPLETE",
        0xC0E7001F: "SPACES_ENTRY_INVALID",
        0xC0E70020: "SPACES_MARK_DIRTY",
        0xC0E80000: "SECCORE_INVALID_COMMAND",
        0xC0E90001: "SYSTEM_INTEGRITY_ROLLBACK_DETECTED",
        0xC0E90002: "SYSTEM_INTEGRITY_POLICY_VIOLATION",
        0xC0E90003: "SYSTEM_INTEGRITY_INVALID_POLICY",
        0xC0E90004: "SYSTEM_INTEGRITY_POLICY_NOT_SIGNED",
        0xC0E90005: "SYSTEM_INTEGRITY_TOO_MANY_POLICIES",
        0xC0E90006: "SYSTEM_INTEGRITY_SUPPLEMENTAL_POLICY_NOT_AUTHORIZED",
        0xC0EA0001: "NO_APPLICABLE_APP_LICENSES_FOUND",
        0xC0EA0002: "CLIP_LICENSE_NOT_FOUND",
        0xC0EA0003: "CLIP_DEVICE_LICENSE_MISSING",
        0xC0EA0004: "CLIP_LICENSE_INVALID_SIGNATURE",
        0xC0EA0005: "CLIP_KEYHOLDER_LICENSE_MISSING_OR_INVALID",
        0xC0EA0006: "CLIP_LICENSE_EXPIRED",
        0xC0EA0007: "CLIP_LICENSE_SIGNED_BY_UNKNOWN_SOURCE",
        0xC0EA0008: "CLIP_LICENSE_NOT_SIGNED",
        0xC0EA0009: "CLIP_LICENSE_HARDWARE_ID_OUT_OF_TOLERANCE",
        0xC0EA000A: "CLIP_LICENSE_DEVICE_ID_MISMATCH",
        0xC0EB0001: "PLATFORM_MANIFEST_NOT_AUTHORIZED",
        0xC0EB0002: "PLATFORM_MANIFEST_INVALID",
        0xC0EB0003: "PLATFORM_MANIFEST_FILE_NOT_AUTHORIZED",
        0xC0EB0004: "PLATFORM_MANIFEST_CATALOG_NOT_AUTHORIZED",
        0xC0EB0005: "PLATFORM_MANIFEST_BINARY_ID_NOT_FOUND",
        0xC0EB0006: "PLATFORM_MANIFEST_NOT_ACTIVE",
        0xC0EB0007: "PLATFORM_MANIFEST_NOT_SIGNED",
        0xC0EC0000: "APPEXEC_CONDITION_NOT_SATISFIED",
        0xC0EC0001: "APPEXEC_HANDLE_INVALIDATED",
        0xC0EC0002: "APPEXEC_INVALID_HOST_GENERATION",
        0xC0EC0003: "APPEXEC_UNEXPECTED_PROCESS_REGISTRATION",
        0xC0EC0004: "APPEXEC_INVALID_HOST_STATE",
        0xC0EC0005: "APPEXEC_NO_DONOR",
        0xC0EC0006: "APPEXEC_HOST_ID_MISMATCH",
        0xC0EC0007: "APPEXEC_UNKNOWN_USER",
    }
)

aliases = MappingProxyType(
    {
        "WAIT_0": 0x00000000,
        "ABANDONED_WAIT_0": 0x00000080,
    }
)
