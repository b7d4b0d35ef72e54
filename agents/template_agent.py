"""Template Agent - The PMO.

Turns free-text requirements (plus image attachments) into a complete,
schema-constrained project template.
"""

from agents.base_agent import BaseAgent
from contracts import GenerateInput, ProjectTemplate, TEMPLATE_SCHEMA


class TemplateAgent(BaseAgent):
    """Generates the whole ProjectTemplate aggregate in one call."""

    PROMPT_TEMPLATE = """你是一位资深 PMO 专家。请根据以下输入，为研发团队生成一套完整、可执行的项目规划模板：
需求背景：[{functional_req}]
技术约束：[{tech_req}]
参考文档：[{file_names}]
预估周期：[{duration}个月]
预估资源：[{team_size}]

要求：
1. 任务分解 (WBS) 必须符合实际研发流程。
2. 必须识别至少 3 个关键风险点。
3. 仅当需求涉及硬件和/或软件实现时才输出 technicalSolution，并且只包含相关的 hardware / software 部分。
4. 风险等级 level 只能是 High、Medium、Low 之一（保持英文原样）。
5. 输出格式：纯 JSON 格式。
6. 严禁在生成的文本中包含任何 HTML 标签（特别是禁止生成 <br> 或 <br/>）。"""

    def get_task_description(self) -> str:
        return "Generate project template"

    def build_prompt(self, input_data: GenerateInput) -> str:
        """Embed the form fields. Every file is referenced by name."""
        return self.PROMPT_TEMPLATE.format(
            functional_req=input_data.functional_req,
            tech_req=input_data.tech_req,
            file_names=", ".join(f.name for f in input_data.files),
            duration=input_data.duration,
            team_size=input_data.team_size,
        )

    def generate(self, input_data: GenerateInput) -> ProjectTemplate:
        """Generate a template.

        Args:
            input_data: Form fields and uploaded files

        Returns:
            Validated ProjectTemplate

        Raises:
            GenerationError: If the backend fails or returns no text
            ParseError: If the reply is not a valid template
        """
        request = self._request(
            self.build_prompt(input_data),
            attachments=input_data.attachments,
            response_schema=TEMPLATE_SCHEMA,
            response_mime_type="application/json",
        )
        text = self._call(request)
        return self._parse_and_validate(text, ProjectTemplate)
