# -*- coding: utf-8 -*-

"""
タグクラウド生成 メインエントリーポイント

テキストファイルから出現頻度上位 N 語のタグクラウドHTMLを生成する。
引数を省略した項目は対話的に入力を求める。
"""

import argparse
import dataclasses
import logging
import sys
from typing import Callable, Optional, Sequence

from dotenv import load_dotenv

# .envファイルから環境変数を読み込む（設定モジュールの読み込みより前）
load_dotenv()

from config.base import get_config  # noqa: E402
from src.core import TagCloudProcessor  # noqa: E402
from src.error_handling import TagCloudError, InvalidCountError  # noqa: E402
from src.logging_config import setup_logging  # noqa: E402
from src.tagcloud import load_tagcloud_config  # noqa: E402


def parse_word_count(raw: str) -> int:
    """表示単語数を整数に変換（負数は0）"""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise InvalidCountError(raw)
    return max(value, 0)


def create_argument_parser() -> argparse.ArgumentParser:
    """コマンドライン引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        description="テキストファイルからタグクラウドHTMLを生成",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  python main.py data/input.txt cloud.html -n 100
  python main.py                       # 対話的に入力
        """,
    )
    parser.add_argument("input", nargs="?", help="入力テキストファイル")
    parser.add_argument("output", nargs="?", help="出力HTMLファイル")
    parser.add_argument("-n", "--count", help="表示する単語数")
    parser.add_argument("--separators", help="区切り文字として扱う文字の列挙")
    parser.add_argument(
        "--no-clamp",
        action="store_true",
        help="最大出現回数の単語のフォントクラスを上限に丸めない",
    )
    parser.add_argument("--debug", action="store_true", help="デバッグログを出力")
    return parser


def _prompt(message: str, reader: Callable[[str], str]) -> str:
    try:
        return reader(message + "\n").strip()
    except EOFError:
        raise TagCloudError(f"入力が終了しました: {message}")


def main(argv: Optional[Sequence[str]] = None, reader: Callable[[str], str] = input) -> int:
    """メイン関数"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    app_config = get_config()
    setup_logging(app_config.logging)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    logger = logging.getLogger(__name__)

    try:
        # 引数で与えられなかった項目は対話的に入力
        input_path = args.input or _prompt("Enter a valid file in location: ", reader)
        output_path = args.output or _prompt("Enter a valid file out location: ", reader)

        tagcloud_config = load_tagcloud_config()
        if args.count is not None:
            raw_count = args.count
        elif args.input and args.output:
            raw_count = str(tagcloud_config.default_word_count)
        else:
            raw_count = _prompt("Enter the number of words you would like to tag cloud: ", reader)
        word_count = parse_word_count(raw_count)

        if args.separators is not None:
            tagcloud_config = dataclasses.replace(tagcloud_config, separators=args.separators)
        if args.no_clamp:
            tagcloud_config = dataclasses.replace(tagcloud_config, clamp_font=False)

        processor = TagCloudProcessor(app_config, tagcloud_config)
        result = processor.run(input_path, output_path, word_count)

    except KeyboardInterrupt:
        print("\n⚠️ 実行が中断されました", file=sys.stderr)
        return 1
    except TagCloudError as e:
        logger.error(f"❌ [{e.stage}] {e}")
        return 1

    if not result.success:
        return 1

    print(f"✅ {output_path} を生成しました（{result.word_count}語）")
    # 読み込みエラーで部分的な結果になった場合も異常終了扱い
    return 1 if result.partial else 0


def cli() -> None:
    """コンソールスクリプト用エントリーポイント"""
    sys.exit(main())


if __name__ == "__main__":
    cli()
