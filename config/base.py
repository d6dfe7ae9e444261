# -*- coding: utf-8 -*-

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import List, Optional


class LoggingConfig(BaseSettings):
    """ログ設定"""
    level: str = Field("INFO", description="ログレベル")
    format: str = Field("text", description="ログフォーマット (json/text)")
    file_enabled: bool = Field(False, description="ファイル出力有効")
    file_path: str = Field("logs/tag_cloud.log", description="ログファイルパス")
    max_file_size: int = Field(10*1024*1024, description="最大ファイルサイズ（バイト）")
    backup_count: int = Field(5, description="バックアップファイル数")
    
    @validator('level')
    def validate_level(cls, v):
        if v.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'不正なログレベルです: {v}')
        return v.upper()
    
    @validator('format')
    def validate_format(cls, v):
        if v.lower() not in ('json', 'text'):
            raise ValueError('ログフォーマットは json または text です')
        return v.lower()
    
    class Config:
        env_prefix = "LOGGING_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class OutputConfig(BaseSettings):
    """入出力設定"""
    input_encoding: str = Field("utf-8", description="入力ファイルの文字コード")
    output_encoding: str = Field("utf-8", description="出力HTMLの文字コード")
    language: str = Field("en", description="HTMLのlang属性")
    stylesheet_urls: List[str] = Field(
        default=[
            "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
            "projects/tag-cloud-generator/data/tagcloud.css",
            "tagcloud.css",
        ],
        description="出力HTMLに埋め込むスタイルシート"
    )
    
    @validator('language')
    def language_not_empty(cls, v):
        if not v.strip():
            raise ValueError('lang属性は空にできません')
        return v.strip()
    
    class Config:
        env_prefix = "OUTPUT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class AppConfig(BaseSettings):
    """アプリケーション全体設定"""
    # get_config() 呼び出し時に生成
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# シングルトンパターンでアプリ設定を管理
_app_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """アプリケーション設定を取得"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reload_config() -> AppConfig:
    """設定を再読み込み"""
    global _app_config
    _app_config = AppConfig()
    return _app_config
