"""Detail Plan Agent - expands one technical subsection into long-form Markdown."""

import re
from typing import Union

from agents.base_agent import BaseAgent
from contracts import TechKind

_BR_TAG = re.compile(r"<br\s*/?>", re.IGNORECASE)


def clean_markdown(text: str) -> str:
    """Replace stray <br> tags with Markdown line breaks."""
    return _BR_TAG.sub("  \n", text).strip()


class DetailPlanAgent(BaseAgent):
    """Writes the hardware BOM or the software architecture/interface spec."""

    PROMPT_TEMPLATE = """你正在为项目 "{project_name}" 编写详细的 {topic}。
摘要参考：{summary}。

特别要求：
1. 使用标准 GFM Markdown 语法输出，必须包含详细表格（如物料清单或接口定义）。
2. 严禁使用任何 HTML 标签（特别是禁止生成 <br> 或 <br/>，请仅使用标准 Markdown 换行符）。
3. 硬件方案必须包含一个名为“物料清单 (BOM)”的 Markdown 表格。
4. 确保生成的表格前后有足够的空行，以确保正确解析。
5. 语气专业，内容具有可落地性。"""

    TOPICS = {
        TechKind.HARDWARE: "硬件 BOM 与说明",
        TechKind.SOFTWARE: "软件架构与接口规约",
    }

    def get_task_description(self) -> str:
        return "Generate detailed tech plan"

    def build_prompt(self, kind: Union[TechKind, str], summary_json: str, project_name: str) -> str:
        return self.PROMPT_TEMPLATE.format(
            project_name=project_name,
            topic=self.TOPICS[TechKind(kind)],
            summary=summary_json,
        )

    def generate(self, kind: Union[TechKind, str], summary_json: str, project_name: str) -> str:
        """Generate the detail plan.

        Args:
            kind: hardware or software
            summary_json: JSON of the subsection being expanded
            project_name: Name of the project

        Returns:
            Markdown text

        Raises:
            GenerationError: If the backend fails or returns no text
        """
        text = self._call(self._request(self.build_prompt(kind, summary_json, project_name)))
        return clean_markdown(text)
