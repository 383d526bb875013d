"""Streamlit UI for previewing and downloading bullet slide decks."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import streamlit as st

from bullet_slide.config import RendererSettings
from bullet_slide.exceptions import SlideDeckError
from bullet_slide.paragraph_flattener import SHAPE_ONLY, flatten_element
from bullet_slide.pptx_renderer import SlideDeckRenderer
from bullet_slide.slide_document import load_default_description, parse_description
from bullet_slide.slide_models import SlideDescription

PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


@st.cache_resource(show_spinner=False)
def load_resources() -> SlideDeckRenderer:
    """Initialise the PPTX renderer from environment settings."""

    return SlideDeckRenderer(RendererSettings.from_env())


def _load_description_from_upload(upload) -> Optional[SlideDescription]:
    if upload is None:
        return None
    return parse_description(json.load(upload))


def fragment_rows(description: SlideDescription, default_face: str) -> List[Dict[str, Any]]:
    """Tabulate the flattened fragments of every element for display."""

    rows: List[Dict[str, Any]] = []
    for element in description.elements:
        fragments = flatten_element(element, default_face=default_face)
        if fragments is SHAPE_ONLY:
            rows.append({"要素": element.element_id, "テキスト": "(図形のみ)"})
            continue
        for fragment in fragments:
            options = fragment.options
            rows.append(
                {
                    "要素": element.element_id,
                    "テキスト": fragment.text,
                    "箇条書き": options.bullet,
                    "インデント": options.indent_level,
                    "改行": options.break_line,
                    "サイズ": options.font_size,
                    "色": options.color,
                    "フォント": options.font_face,
                }
            )
    return rows


def main() -> None:
    st.set_page_config(page_title="Bullet Slide Generator", layout="wide")
    st.title("Bullet Slide Generator")

    renderer = load_resources()
    settings = renderer.settings

    with st.sidebar:
        st.header("スライド定義")
        uploaded = st.file_uploader("スライド定義JSONを読み込む", type="json")
        try:
            description = _load_description_from_upload(uploaded)
        except (json.JSONDecodeError, SlideDeckError) as exc:
            st.error("JSONを読み込めませんでした。")
            st.exception(exc)
            description = None
        if description is None:
            description = load_default_description()
            st.caption("サンプルのスライド定義を使用しています。")
        else:
            st.success("スライド定義を読み込みました。")

    st.subheader("フラット化されたテキスト")
    st.dataframe(
        fragment_rows(description, settings.default_font_face),
        use_container_width=True,
    )

    try:
        pptx_bytes = renderer.render_description(description).getvalue()
    except SlideDeckError as exc:
        st.warning("PPTX生成に失敗しました。詳細は下記ログを確認してください。")
        st.exception(exc)
        return

    preview_bytes = renderer.render_preview_image(description, pptx_bytes=pptx_bytes)
    if preview_bytes:
        st.image(preview_bytes, caption="スライドプレビュー", use_container_width=True)
    else:
        st.info("プレビュー画像を生成できませんでした。LibreOfficeのインストール状況を確認してください。")

    st.download_button(
        "PPTXをダウンロード",
        data=pptx_bytes,
        file_name=settings.output_path.name,
        mime=PPTX_MIME,
    )
    st.download_button(
        "スライド定義JSONをダウンロード",
        data=json.dumps(description.to_dict(), ensure_ascii=False, indent=2).encode("utf-8"),
        file_name="slide.json",
        mime="application/json",
    )


if __name__ == "__main__":  # pragma: no cover - Streamlit handles execution
    main()
