from .outputs import (
    CreateVideoOutput,
    UpdateVideoOutput,
    VideoCastMemberOutput,
    VideoCategoryOutput,
    VideoGenreOutput,
    VideoOutput,
)
from .use_cases import (
    CreateVideoInput,
    CreateVideoUseCase,
    DeleteVideoInput,
    DeleteVideoUseCase,
    GetVideoInput,
    GetVideoUseCase,
    ListVideosInput,
    ListVideosUseCase,
    ProcessAudioVideoMediaInput,
    ProcessAudioVideoMediaUseCase,
    UpdateVideoInput,
    UpdateVideoUseCase,
    UploadAudioVideoMediaInput,
    UploadAudioVideoMediaUseCase,
    UploadImageMediaInput,
    UploadImageMediaUseCase,
)

__all__ = [
    "CreateVideoInput",
    "CreateVideoOutput",
    "CreateVideoUseCase",
    "DeleteVideoInput",
    "DeleteVideoUseCase",
    "GetVideoInput",
    "GetVideoUseCase",
    "ListVideosInput",
    "ListVideosUseCase",
    "ProcessAudioVideoMediaInput",
    "ProcessAudioVideoMediaUseCase",
    "UpdateVideoInput",
    "UpdateVideoOutput",
    "UpdateVideoUseCase",
    "UploadAudioVideoMediaInput",
    "UploadAudioVideoMediaUseCase",
    "UploadImageMediaInput",
    "UploadImageMediaUseCase",
    "VideoCastMemberOutput",
    "VideoCategoryOutput",
    "VideoGenreOutput",
    "VideoOutput",
]
