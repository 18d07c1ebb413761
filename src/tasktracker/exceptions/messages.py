"""
Error message catalog.

Every domain error carries a stable `ErrorKey`. Rendering picks one of the
message sets (English or Japanese) and formats it as

    [<KEY>] <message>: (<context>)

The language is always passed in by the caller (usually the repository, which
received it from Settings.ERROR_LANGUAGE); nothing here holds a current language.
"""

from enum import Enum

DEFAULT_LANGUAGE = "en"
# order matches the message tuples in _CATALOG
SUPPORTED_LANGUAGES = ("en", "ja")
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ErrorKey(str, Enum):
    # Pagination
    NO_PAGE_SPECIFIED = "NoPageSpecified"
    NO_PAGE_SIZE_SPECIFIED = "NoPageSizeSpecified"
    INVALID_PAGINATION = "InvalidPagination"
    PAGE_SIZE_TOO_LARGE = "PageSizeTooLarge"

    # Store
    STORE_CONNECTION_FAILED = "StoreConnectionFailed"

    # Project
    PROJECT_ID_INVALID = "ProjectIdInvalid"
    PROJECT_ID_MUST_BE_NONE = "ProjectIdMustBeNone"
    PROJECT_NAME_EMPTY = "ProjectNameEmpty"
    PROJECT_NAME_TOO_LONG = "ProjectNameTooLong"
    PROJECT_NAME_ALREADY_EXISTS = "ProjectNameAlreadyExists"
    PROJECT_GET_BY_ID_NOT_FOUND = "ProjectGetByIdNotFound"
    PROJECT_GET_BY_NAME_NOT_FOUND = "ProjectGetByNameNotFound"
    PROJECT_GET_PAGINATION_NOT_FOUND = "ProjectGetPaginationNotFound"
    PROJECT_DELETE_FAILED_BY_ID_NOT_FOUND = "ProjectDeleteFailedByIdNotFound"
    PROJECT_CREATE_FAILED = "ProjectCreateFailed"
    PROJECT_GET_BY_ID_FAILED = "ProjectGetByIdFailed"
    PROJECT_GET_BY_NAME_FAILED = "ProjectGetByNameFailed"
    PROJECT_GET_ALL_FAILED = "ProjectGetAllFailed"
    PROJECT_GET_BY_FILTER_FAILED = "ProjectGetByFilterFailed"
    PROJECT_GET_COUNT_FAILED = "ProjectGetCountFailed"
    PROJECT_UPDATE_FAILED = "ProjectUpdateFailed"
    PROJECT_DELETE_FAILED = "ProjectDeleteFailed"

    # User
    USER_ID_INVALID = "UserIdInvalid"
    USER_ID_MUST_BE_NONE = "UserIdMustBeNone"
    USER_NAME_EMPTY = "UserNameEmpty"
    USER_NAME_TOO_LONG = "UserNameTooLong"
    USER_NAME_CONTAINS_INVALID_CHARACTERS = "UserNameContainsInvalidCharacters"
    USER_EMAIL_EMPTY = "UserEmailEmpty"
    USER_EMAIL_TOO_LONG = "UserEmailTooLong"
    USER_EMAIL_INVALID = "UserEmailInvalid"
    USER_PASSWORD_EMPTY = "UserPasswordEmpty"
    USER_PASSWORD_INVALID = "UserPasswordInvalid"
    USER_ALREADY_EXISTS = "UserAlreadyExists"
    USER_GET_BY_ID_NOT_FOUND = "UserGetByIdNotFound"
    USER_GET_BY_NAME_NOT_FOUND = "UserGetByNameNotFound"
    USER_GET_PAGINATION_NOT_FOUND = "UserGetPaginationNotFound"
    USER_DELETE_FAILED_BY_ID_NOT_FOUND = "UserDeleteFailedByIdNotFound"
    USER_CREATE_FAILED = "UserCreateFailed"
    USER_GET_BY_ID_FAILED = "UserGetByIdFailed"
    USER_GET_BY_NAME_FAILED = "UserGetByNameFailed"
    USER_GET_ALL_FAILED = "UserGetAllFailed"
    USER_GET_BY_FILTER_FAILED = "UserGetByFilterFailed"
    USER_GET_COUNT_FAILED = "UserGetCountFailed"
    USER_UPDATE_FAILED = "UserUpdateFailed"
    USER_DELETE_FAILED = "UserDeleteFailed"

    # Task
    TASK_ID_INVALID = "TaskIdInvalid"
    TASK_ID_MUST_BE_NONE = "TaskIdMustBeNone"
    TASK_PROJECT_ID_INVALID = "TaskProjectIdInvalid"
    TASK_PARENT_ID_INVALID = "TaskParentIdInvalid"
    TASK_LEVEL_INVALID = "TaskLevelInvalid"
    TASK_STATUS_INVALID = "TaskStatusInvalid"
    TASK_NAME_EMPTY = "TaskNameEmpty"
    TASK_NAME_TOO_LONG = "TaskNameTooLong"
    TASK_DESCRIPTION_TOO_LONG = "TaskDescriptionTooLong"
    TASK_TIMESTAMP_INVALID = "TaskTimestampInvalid"
    TASK_PROJECT_ID_NOT_FOUND = "TaskProjectIdNotFound"
    TASK_NO_PARENT_ID_ON_NON_MAJOR_TASK = "TaskNoParentIdOnNonMajorTask"
    TASK_PARENT_ID_ON_MAJOR_TASK = "TaskParentIdOnMajorTask"
    TASK_PARENT_ID_NOT_FOUND = "TaskParentIdNotFound"
    TASK_PARENT_LEVEL_INVALID = "TaskParentLevelInvalid"
    TASK_PARENT_ID_CANNOT_BE_SAME_AS_TASK_ID = "TaskParentIdCannotBeSameAsTaskId"
    TASK_GET_BY_ID_NOT_FOUND = "TaskGetByIdNotFound"
    TASK_GET_PAGINATION_NOT_FOUND = "TaskGetPaginationNotFound"
    TASK_DELETE_FAILED_BY_ID_NOT_FOUND = "TaskDeleteFailedByIdNotFound"
    TASK_CREATE_FAILED = "TaskCreateFailed"
    TASK_GET_BY_ID_FAILED = "TaskGetByIdFailed"
    TASK_GET_ALL_FAILED = "TaskGetAllFailed"
    TASK_GET_BY_FILTER_FAILED = "TaskGetByFilterFailed"
    TASK_GET_COUNT_FAILED = "TaskGetCountFailed"
    TASK_UPDATE_FAILED = "TaskUpdateFailed"
    TASK_DELETE_FAILED = "TaskDeleteFailed"

    # UserAssign
    USER_ASSIGN_ID_INVALID = "UserAssignIdInvalid"
    USER_ASSIGN_ID_MUST_BE_NONE = "UserAssignIdMustBeNone"
    USER_ASSIGN_USER_ID_INVALID = "UserAssignUserIdInvalid"
    USER_ASSIGN_TASK_ID_INVALID = "UserAssignTaskIdInvalid"
    USER_ASSIGN_USER_ID_NOT_FOUND = "UserAssignUserIdNotFound"
    USER_ASSIGN_TASK_ID_NOT_FOUND = "UserAssignTaskIdNotFound"
    USER_ASSIGN_TO_NOT_MAX_LEVEL_TASK = "UserAssignToNotMaxLevelTask"
    USER_ASSIGN_SAME_USER_ASSIGN_EXISTS = "UserAssignSameUserAssignExists"
    USER_ASSIGN_GET_BY_ID_NOT_FOUND = "UserAssignGetByIdNotFound"
    USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_NOT_FOUND = "UserAssignGetByUserIdAndTaskIdNotFound"
    USER_ASSIGN_GET_PAGINATION_NOT_FOUND = "UserAssignGetPaginationNotFound"
    USER_ASSIGN_DELETE_FAILED_BY_ID_NOT_FOUND = "UserAssignDeleteFailedByIdNotFound"
    USER_ASSIGN_CREATE_FAILED = "UserAssignCreateFailed"
    USER_ASSIGN_GET_BY_ID_FAILED = "UserAssignGetByIdFailed"
    USER_ASSIGN_GET_BY_TASK_ID_FAILED = "UserAssignGetByTaskIdFailed"
    USER_ASSIGN_GET_BY_USER_ID_FAILED = "UserAssignGetByUserIdFailed"
    USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_FAILED = "UserAssignGetByUserIdAndTaskIdFailed"
    USER_ASSIGN_GET_ALL_FAILED = "UserAssignGetAllFailed"
    USER_ASSIGN_GET_BY_FILTER_FAILED = "UserAssignGetByFilterFailed"
    USER_ASSIGN_GET_COUNT_FAILED = "UserAssignGetCountFailed"
    USER_ASSIGN_UPDATE_FAILED = "UserAssignUpdateFailed"
    USER_ASSIGN_DELETE_FAILED = "UserAssignDeleteFailed"

    # Comment
    COMMENT_ID_INVALID = "CommentIdInvalid"
    COMMENT_ID_MUST_BE_NONE = "CommentIdMustBeNone"
    COMMENT_USER_ID_INVALID = "CommentUserIdInvalid"
    COMMENT_TASK_ID_INVALID = "CommentTaskIdInvalid"
    COMMENT_CONTENT_EMPTY = "CommentContentEmpty"
    COMMENT_CONTENT_TOO_LONG = "CommentContentTooLong"
    COMMENT_TIMESTAMP_INVALID = "CommentTimestampInvalid"
    COMMENT_USER_ID_NOT_FOUND = "CommentUserIdNotFound"
    COMMENT_TASK_ID_NOT_FOUND = "CommentTaskIdNotFound"
    COMMENT_TO_NOT_MAX_LEVEL_TASK = "CommentToNotMaxLevelTask"
    COMMENT_GET_BY_ID_NOT_FOUND = "CommentGetByIdNotFound"
    COMMENT_GET_PAGINATION_NOT_FOUND = "CommentGetPaginationNotFound"
    COMMENT_DELETE_FAILED_BY_ID_NOT_FOUND = "CommentDeleteFailedByIdNotFound"
    COMMENT_CREATE_FAILED = "CommentCreateFailed"
    COMMENT_GET_BY_ID_FAILED = "CommentGetByIdFailed"
    COMMENT_GET_BY_TASK_ID_FAILED = "CommentGetByTaskIdFailed"
    COMMENT_GET_BY_USER_ID_FAILED = "CommentGetByUserIdFailed"
    COMMENT_GET_ALL_FAILED = "CommentGetAllFailed"
    COMMENT_GET_BY_FILTER_FAILED = "CommentGetByFilterFailed"
    COMMENT_GET_COUNT_FAILED = "CommentGetCountFailed"
    COMMENT_UPDATE_FAILED = "CommentUpdateFailed"
    COMMENT_DELETE_FAILED = "CommentDeleteFailed"

    # Task + User
    TASK_USER_USER_ID_INVALID = "TaskUserUserIdInvalid"
    TASK_USER_GET_BY_ID_NOT_FOUND = "TaskUserGetByIdNotFound"
    TASK_USER_GET_PAGINATION_NOT_FOUND = "TaskUserGetPaginationNotFound"
    TASK_USER_GET_BY_ID_FAILED = "TaskUserGetByIdFailed"
    TASK_USER_GET_BY_FILTER_FAILED = "TaskUserGetByFilterFailed"

    def __str__(self) -> str:
        return self.value


# (english, japanese)
_CATALOG: dict[ErrorKey, tuple[str, str]] = {
    ErrorKey.NO_PAGE_SPECIFIED: ("No page specified", "ページが指定されていません"),
    ErrorKey.NO_PAGE_SIZE_SPECIFIED: ("No page size specified", "ページサイズが指定されていません"),
    ErrorKey.INVALID_PAGINATION: ("Invalid pagination", "無効なページングです"),
    ErrorKey.PAGE_SIZE_TOO_LARGE: ("Page size too large", "ページサイズが大きすぎます"),
    ErrorKey.STORE_CONNECTION_FAILED: (
        "Could not reach the database, the operation can be retried",
        "データベースに接続できませんでした。再試行できます",
    ),

    ErrorKey.PROJECT_ID_INVALID: ("Project ID must be 0 or greater", "プロジェクトIDは0以上でなければなりません"),
    ErrorKey.PROJECT_ID_MUST_BE_NONE: (
        "Project ID cannot be specified when creating a project",
        "プロジェクト作成時にIDは指定できません",
    ),
    ErrorKey.PROJECT_NAME_EMPTY: ("Project name cannot be empty", "プロジェクト名は空にできません"),
    ErrorKey.PROJECT_NAME_TOO_LONG: (
        "Project name cannot be longer than 128 characters",
        "プロジェクト名は128文字以下である必要があります",
    ),
    ErrorKey.PROJECT_NAME_ALREADY_EXISTS: ("Project name already exists", "プロジェクト名はすでに存在します"),
    ErrorKey.PROJECT_GET_BY_ID_NOT_FOUND: ("Project not found", "プロジェクトが見つかりません"),
    ErrorKey.PROJECT_GET_BY_NAME_NOT_FOUND: ("Project name not found", "プロジェクト名が見つかりません"),
    ErrorKey.PROJECT_GET_PAGINATION_NOT_FOUND: (
        "No projects found in the specified page",
        "指定ページ内にプロジェクトが存在しません",
    ),
    ErrorKey.PROJECT_DELETE_FAILED_BY_ID_NOT_FOUND: (
        "Failed to delete project because the project does not exist",
        "存在しないプロジェクトを削除しようとしました",
    ),
    ErrorKey.PROJECT_CREATE_FAILED: ("Failed to create project", "プロジェクトの作成に失敗しました"),
    ErrorKey.PROJECT_GET_BY_ID_FAILED: ("Failed to get project by ID", "IDによるプロジェクトの取得に失敗しました"),
    ErrorKey.PROJECT_GET_BY_NAME_FAILED: ("Failed to get project by name", "名前によるプロジェクトの取得に失敗しました"),
    ErrorKey.PROJECT_GET_ALL_FAILED: ("Failed to get all projects", "全てのプロジェクトの取得に失敗しました"),
    ErrorKey.PROJECT_GET_BY_FILTER_FAILED: ("Failed to get projects by filter", "フィルターによるプロジェクトの取得に失敗しました"),
    ErrorKey.PROJECT_GET_COUNT_FAILED: ("Failed to count projects", "プロジェクト数の取得に失敗しました"),
    ErrorKey.PROJECT_UPDATE_FAILED: ("Failed to update project", "プロジェクトの更新に失敗しました"),
    ErrorKey.PROJECT_DELETE_FAILED: ("Failed to delete project", "プロジェクトの削除に失敗しました"),

    ErrorKey.USER_ID_INVALID: ("User ID must be 0 or greater", "ユーザーIDは0以上でなければなりません"),
    ErrorKey.USER_ID_MUST_BE_NONE: (
        "User ID cannot be specified when creating a user",
        "ユーザー作成時にIDは指定できません",
    ),
    ErrorKey.USER_NAME_EMPTY: ("Username cannot be empty", "ユーザー名は空にできません"),
    ErrorKey.USER_NAME_TOO_LONG: (
        "Username cannot be longer than 128 characters",
        "ユーザー名は128文字以下である必要があります",
    ),
    ErrorKey.USER_NAME_CONTAINS_INVALID_CHARACTERS: (
        "Username can only contain letters, digits, '.' and '_'",
        "ユーザー名には英数字と「.」「_」のみ使用できます",
    ),
    ErrorKey.USER_EMAIL_EMPTY: ("Email cannot be empty", "メールアドレスは空にできません"),
    ErrorKey.USER_EMAIL_TOO_LONG: (
        "Email cannot be longer than 254 characters",
        "メールアドレスは254文字以下である必要があります",
    ),
    ErrorKey.USER_EMAIL_INVALID: ("Invalid email address", "無効なメールアドレスです"),
    ErrorKey.USER_PASSWORD_EMPTY: ("Password cannot be empty", "パスワードは空にできません"),
    ErrorKey.USER_PASSWORD_INVALID: (
        "Password hash must be 64 lowercase hex characters",
        "パスワードハッシュは64文字の小文字16進数である必要があります",
    ),
    ErrorKey.USER_ALREADY_EXISTS: ("Username or email already exists", "ユーザー名またはメールアドレスはすでに存在します"),
    ErrorKey.USER_GET_BY_ID_NOT_FOUND: ("User not found", "ユーザーが見つかりません"),
    ErrorKey.USER_GET_BY_NAME_NOT_FOUND: ("Username not found", "ユーザー名が見つかりません"),
    ErrorKey.USER_GET_PAGINATION_NOT_FOUND: (
        "No users found in the specified page",
        "指定ページ内にユーザーが存在しません",
    ),
    ErrorKey.USER_DELETE_FAILED_BY_ID_NOT_FOUND: (
        "Failed to delete user because the user does not exist",
        "存在しないユーザーを削除しようとしました",
    ),
    ErrorKey.USER_CREATE_FAILED: ("Failed to create user", "ユーザーの作成に失敗しました"),
    ErrorKey.USER_GET_BY_ID_FAILED: ("Failed to get user by ID", "IDによるユーザーの取得に失敗しました"),
    ErrorKey.USER_GET_BY_NAME_FAILED: ("Failed to get user by username", "ユーザー名によるユーザーの取得に失敗しました"),
    ErrorKey.USER_GET_ALL_FAILED: ("Failed to get all users", "全てのユーザーの取得に失敗しました"),
    ErrorKey.USER_GET_BY_FILTER_FAILED: ("Failed to get users by filter", "フィルターによるユーザーの取得に失敗しました"),
    ErrorKey.USER_GET_COUNT_FAILED: ("Failed to count users", "ユーザー数の取得に失敗しました"),
    ErrorKey.USER_UPDATE_FAILED: ("Failed to update user", "ユーザーの更新に失敗しました"),
    ErrorKey.USER_DELETE_FAILED: ("Failed to delete user", "ユーザーの削除に失敗しました"),

    ErrorKey.TASK_ID_INVALID: ("Task ID must be 0 or greater", "タスクIDは0以上でなければなりません"),
    ErrorKey.TASK_ID_MUST_BE_NONE: (
        "Task ID cannot be specified when creating a task",
        "タスク作成時にIDは指定できません",
    ),
    ErrorKey.TASK_PROJECT_ID_INVALID: ("Project ID must be 0 or greater", "プロジェクトIDは0以上でなければなりません"),
    ErrorKey.TASK_PARENT_ID_INVALID: ("Parent ID must be 0 or greater", "親タスクIDは0以上でなければなりません"),
    ErrorKey.TASK_LEVEL_INVALID: ("Invalid task level", "無効なタスクレベルです"),
    ErrorKey.TASK_STATUS_INVALID: ("Invalid task status", "無効なタスクステータスです"),
    ErrorKey.TASK_NAME_EMPTY: ("Task name cannot be empty", "タスク名は空にできません"),
    ErrorKey.TASK_NAME_TOO_LONG: (
        "Task name cannot be longer than 128 characters",
        "タスク名は128文字以下である必要があります",
    ),
    ErrorKey.TASK_DESCRIPTION_TOO_LONG: (
        "Task description cannot be longer than 1024 characters",
        "タスクの説明は1024文字以下である必要があります",
    ),
    ErrorKey.TASK_TIMESTAMP_INVALID: ("Timestamp must be greater than 0", "タイムスタンプは0より大きくなければなりません"),
    ErrorKey.TASK_PROJECT_ID_NOT_FOUND: ("Project not found", "プロジェクトが見つかりません"),
    ErrorKey.TASK_NO_PARENT_ID_ON_NON_MAJOR_TASK: (
        "Parent ID is required for non-major tasks",
        "大項目タスク以外のタスクには親タスクIDが必要です",
    ),
    ErrorKey.TASK_PARENT_ID_ON_MAJOR_TASK: (
        "Major tasks cannot have a parent",
        "大項目タスクに親タスクは指定できません",
    ),
    ErrorKey.TASK_PARENT_ID_NOT_FOUND: ("Parent task not found", "親タスクが見つかりません"),
    ErrorKey.TASK_PARENT_LEVEL_INVALID: (
        "Parent task level is not one level higher",
        "親タスクのレベルが1つ上ではありません",
    ),
    ErrorKey.TASK_PARENT_ID_CANNOT_BE_SAME_AS_TASK_ID: (
        "Parent ID cannot be the same as the task ID",
        "親タスクIDはタスクIDと同じにできません",
    ),
    ErrorKey.TASK_GET_BY_ID_NOT_FOUND: ("Task not found", "タスクが見つかりません"),
    ErrorKey.TASK_GET_PAGINATION_NOT_FOUND: (
        "No tasks found in the specified page",
        "指定ページ内にタスクが存在しません",
    ),
    ErrorKey.TASK_DELETE_FAILED_BY_ID_NOT_FOUND: (
        "Failed to delete task because the task does not exist",
        "存在しないタスクを削除しようとしました",
    ),
    ErrorKey.TASK_CREATE_FAILED: ("Failed to create task", "タスクの作成に失敗しました"),
    ErrorKey.TASK_GET_BY_ID_FAILED: ("Failed to get task by ID", "IDによるタスクの取得に失敗しました"),
    ErrorKey.TASK_GET_ALL_FAILED: ("Failed to get all tasks", "全てのタスクの取得に失敗しました"),
    ErrorKey.TASK_GET_BY_FILTER_FAILED: ("Failed to get tasks by filter", "フィルターによるタスクの取得に失敗しました"),
    ErrorKey.TASK_GET_COUNT_FAILED: ("Failed to count tasks", "タスク数の取得に失敗しました"),
    ErrorKey.TASK_UPDATE_FAILED: ("Failed to update task", "タスクの更新に失敗しました"),
    ErrorKey.TASK_DELETE_FAILED: ("Failed to delete task", "タスクの削除に失敗しました"),

    ErrorKey.USER_ASSIGN_ID_INVALID: ("User assign ID must be 0 or greater", "ユーザー割り当てIDは0以上でなければなりません"),
    ErrorKey.USER_ASSIGN_ID_MUST_BE_NONE: (
        "User assign ID cannot be specified when creating a user assign",
        "ユーザー割り当て作成時にIDは指定できません",
    ),
    ErrorKey.USER_ASSIGN_USER_ID_INVALID: ("User ID must be 0 or greater", "ユーザーIDは0以上でなければなりません"),
    ErrorKey.USER_ASSIGN_TASK_ID_INVALID: ("Task ID must be 0 or greater", "タスクIDは0以上でなければなりません"),
    ErrorKey.USER_ASSIGN_USER_ID_NOT_FOUND: (
        "The user to assign does not exist",
        "存在しないユーザーをタスクに割り当てしようとしました",
    ),
    ErrorKey.USER_ASSIGN_TASK_ID_NOT_FOUND: (
        "The task to assign does not exist",
        "存在しないタスクをユーザーに割り当てしようとしました",
    ),
    ErrorKey.USER_ASSIGN_TO_NOT_MAX_LEVEL_TASK: (
        "Assignment must target a leaf-level task",
        "ユーザーは最も詳細な階層のタスクにしか割り当てられません",
    ),
    ErrorKey.USER_ASSIGN_SAME_USER_ASSIGN_EXISTS: (
        "The user is already assigned to the task",
        "すでにユーザーはタスクに割り当てられています",
    ),
    ErrorKey.USER_ASSIGN_GET_BY_ID_NOT_FOUND: ("User assign not found", "ユーザー割り当てが見つかりません"),
    ErrorKey.USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_NOT_FOUND: (
        "User assign not found",
        "ユーザー割り当てが見つかりません",
    ),
    ErrorKey.USER_ASSIGN_GET_PAGINATION_NOT_FOUND: (
        "No user assigns found in the specified page",
        "指定ページ内にユーザー割り当てが存在しません",
    ),
    ErrorKey.USER_ASSIGN_DELETE_FAILED_BY_ID_NOT_FOUND: (
        "Failed to delete user assign because the user assign does not exist",
        "存在しないユーザー割り当てを削除しようとしました",
    ),
    ErrorKey.USER_ASSIGN_CREATE_FAILED: ("Failed to create user assign", "ユーザー割り当ての作成に失敗しました"),
    ErrorKey.USER_ASSIGN_GET_BY_ID_FAILED: ("Failed to get user assign by ID", "IDによるユーザー割り当ての取得に失敗しました"),
    ErrorKey.USER_ASSIGN_GET_BY_TASK_ID_FAILED: (
        "Failed to get user assigns by task ID",
        "タスクIDによるユーザー割り当ての取得に失敗しました",
    ),
    ErrorKey.USER_ASSIGN_GET_BY_USER_ID_FAILED: (
        "Failed to get user assigns by user ID",
        "ユーザーIDによるユーザー割り当ての取得に失敗しました",
    ),
    ErrorKey.USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_FAILED: (
        "Failed to get user assign by user ID and task ID",
        "ユーザーIDとタスクIDによるユーザー割り当ての取得に失敗しました",
    ),
    ErrorKey.USER_ASSIGN_GET_ALL_FAILED: ("Failed to get all user assigns", "全てのユーザー割り当ての取得に失敗しました"),
    ErrorKey.USER_ASSIGN_GET_BY_FILTER_FAILED: (
        "Failed to get user assigns by filter",
        "フィルターによるユーザー割り当ての取得に失敗しました",
    ),
    ErrorKey.USER_ASSIGN_GET_COUNT_FAILED: ("Failed to count user assigns", "ユーザー割り当て数の取得に失敗しました"),
    ErrorKey.USER_ASSIGN_UPDATE_FAILED: ("Failed to update user assign", "ユーザー割り当ての更新に失敗しました"),
    ErrorKey.USER_ASSIGN_DELETE_FAILED: ("Failed to delete user assign", "ユーザー割り当ての削除に失敗しました"),

    ErrorKey.COMMENT_ID_INVALID: ("Comment ID must be 0 or greater", "コメントIDは0以上でなければなりません"),
    ErrorKey.COMMENT_ID_MUST_BE_NONE: (
        "Comment ID cannot be specified when creating a comment",
        "コメント作成時にIDは指定できません",
    ),
    ErrorKey.COMMENT_USER_ID_INVALID: ("User ID must be 0 or greater", "ユーザーIDは0以上でなければなりません"),
    ErrorKey.COMMENT_TASK_ID_INVALID: ("Task ID must be 0 or greater", "タスクIDは0以上でなければなりません"),
    ErrorKey.COMMENT_CONTENT_EMPTY: ("Comment content cannot be empty", "コメント内容は空にできません"),
    ErrorKey.COMMENT_CONTENT_TOO_LONG: (
        "Comment content cannot be longer than 2024 characters",
        "コメント内容は2024文字以下である必要があります",
    ),
    ErrorKey.COMMENT_TIMESTAMP_INVALID: ("Timestamp must be greater than 0", "タイムスタンプは0より大きくなければなりません"),
    ErrorKey.COMMENT_USER_ID_NOT_FOUND: ("The commenting user does not exist", "存在しないユーザーのコメントです"),
    ErrorKey.COMMENT_TASK_ID_NOT_FOUND: ("The commented task does not exist", "存在しないタスクのコメントです"),
    ErrorKey.COMMENT_TO_NOT_MAX_LEVEL_TASK: (
        "Comments can only be added to leaf-level tasks",
        "コメントは最も詳細な階層のタスクにしか追加できません",
    ),
    ErrorKey.COMMENT_GET_BY_ID_NOT_FOUND: ("Comment not found", "コメントが見つかりません"),
    ErrorKey.COMMENT_GET_PAGINATION_NOT_FOUND: (
        "No comments found in the specified page",
        "指定ページ内にコメントが存在しません",
    ),
    ErrorKey.COMMENT_DELETE_FAILED_BY_ID_NOT_FOUND: (
        "Failed to delete comment because the comment does not exist",
        "存在しないコメントを削除しようとしました",
    ),
    ErrorKey.COMMENT_CREATE_FAILED: ("Failed to create comment", "コメントの作成に失敗しました"),
    ErrorKey.COMMENT_GET_BY_ID_FAILED: ("Failed to get comment by ID", "IDによるコメントの取得に失敗しました"),
    ErrorKey.COMMENT_GET_BY_TASK_ID_FAILED: ("Failed to get comments by task ID", "タスクIDによるコメントの取得に失敗しました"),
    ErrorKey.COMMENT_GET_BY_USER_ID_FAILED: ("Failed to get comments by user ID", "ユーザーIDによるコメントの取得に失敗しました"),
    ErrorKey.COMMENT_GET_ALL_FAILED: ("Failed to get all comments", "全てのコメントの取得に失敗しました"),
    ErrorKey.COMMENT_GET_BY_FILTER_FAILED: ("Failed to get comments by filter", "フィルターによるコメントの取得に失敗しました"),
    ErrorKey.COMMENT_GET_COUNT_FAILED: ("Failed to count comments", "コメント数の取得に失敗しました"),
    ErrorKey.COMMENT_UPDATE_FAILED: ("Failed to update comment", "コメントの更新に失敗しました"),
    ErrorKey.COMMENT_DELETE_FAILED: ("Failed to delete comment", "コメントの削除に失敗しました"),

    ErrorKey.TASK_USER_USER_ID_INVALID: ("User ID must be 0 or greater", "ユーザーIDは0以上でなければなりません"),
    ErrorKey.TASK_USER_GET_BY_ID_NOT_FOUND: ("Task not found", "タスクが見つかりません"),
    ErrorKey.TASK_USER_GET_PAGINATION_NOT_FOUND: (
        "No tasks and users found on the specified page",
        "指定ページにタスクとユーザーが存在しません",
    ),
    ErrorKey.TASK_USER_GET_BY_ID_FAILED: (
        "Failed to get task and users by task ID",
        "タスクIDによるタスクとユーザーの取得に失敗しました",
    ),
    ErrorKey.TASK_USER_GET_BY_FILTER_FAILED: (
        "Failed to get tasks and users by filter",
        "フィルターによるタスクとユーザーの取得に失敗しました",
    ),
}


def get_message(key: ErrorKey | str, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Return the bare message for `key` in `language`.

    Unknown languages fall back to English; unknown keys to "Unknown error".
    """
    try:
        entry = _CATALOG[ErrorKey(key)]
    except (KeyError, ValueError):
        return UNKNOWN_ERROR_MESSAGE
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE
    return entry[SUPPORTED_LANGUAGES.index(language)]


def render_message(key: ErrorKey | str, context: str = "", language: str = DEFAULT_LANGUAGE) -> str:
    """Format an error as `[KEY] message: (context)`."""
    name = key.value if isinstance(key, ErrorKey) else key
    return f"[{name}] {get_message(key, language)}: ({context})"
