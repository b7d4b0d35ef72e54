"""Shared fixtures: a sample template and scripted providers (no network)."""

import copy
import json
from typing import Callable, List, Optional, Union

import pytest

from agents import GenerationClient
from contracts import ProjectTemplate
from providers.base import GenerationRequest, LLMProvider, LLMResponse


SAMPLE_TEMPLATE = {
    "basicInfo": {
        "name": "智能温控 系统",
        "type": "软硬件一体化",
        "iconSuggestion": "Cpu",
        "scenario": "办公楼宇的分区温度监测与远程调节",
        "features": ["远程温控", "能耗统计", "异常告警", "OTA 升级"],
    },
    "technicalSolution": {
        "hardware": {
            "scheme": "ESP32 主控 + 数字温度传感器",
            "components": ["ESP32-S3", "DS18B20", "继电器模块"],
            "designPoints": ["低功耗待机", "防潮外壳"],
        },
        "software": {
            "languages": ["Python", "TypeScript"],
            "frameworks": ["FastAPI", "React"],
            "architecture": "前后端分离 + MQTT 设备网关",
        },
    },
    "phases": [
        {
            "name": "需求分析",
            "goal": "明确功能边界",
            "keyOutput": "PRD 文档",
            "isMilestone": True,
            "tasks": [
                {
                    "name": "用户调研",
                    "description": "访谈物业与租户",
                    "output": "调研报告",
                    "role": "产品经理",
                },
                {
                    "name": "需求评审",
                    "description": "评审 PRD",
                    "output": "评审纪要",
                    "role": "产品经理",
                    "dependencies": ["用户调研"],
                },
            ],
        },
        {
            "name": "硬件原型开发与验证阶段",
            "goal": "完成可用样机",
            "keyOutput": "EVT 样机",
            "isMilestone": False,
            "tasks": [
                {
                    "name": "原理图设计",
                    "description": "主控与传感器电路",
                    "output": "原理图",
                    "role": "硬件工程师",
                    "dependencies": ["需求评审", "不存在的任务"],
                },
            ],
        },
    ],
    "estimates": {
        "totalDuration": "3个月",
        "phaseDurations": [
            {"phaseName": "需求分析", "days": 10},
            {"phaseName": "硬件原型开发与验证阶段", "days": 45},
        ],
        "teamStructure": [
            {"role": "硬件工程师", "count": 2},
            {"role": "后端工程师", "count": 1},
        ],
    },
    "risks": [
        {
            "description": "芯片供货周期长",
            "impactPhase": "硬件原型开发与验证阶段",
            "level": "High",
            "strategy": "提前备料并准备替代型号",
        },
        {
            "description": "需求变更 | 范围蔓延",
            "impactPhase": "全周期",
            "level": "Medium",
            "strategy": "变更评审",
        },
        {
            "description": "无线信号覆盖不足",
            "impactPhase": "部署",
            "level": "Low",
            "strategy": "增加中继节点",
        },
    ],
    "usage": {
        "suitability": "中小型楼宇 IoT 项目",
        "notes": "根据现场条件调整传感器数量",
        "complexity": "中等",
    },
}


Reply = Union[str, Exception]


class ScriptedProvider(LLMProvider):
    """Returns queued replies in order; an Exception reply is raised."""

    def __init__(self, replies: Optional[List[Reply]] = None, on_call: Optional[Callable] = None):
        self.replies = list(replies or [])
        self.requests: List[GenerationRequest] = []
        self.on_call = on_call

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return "fake-model"

    def generate(self, request: GenerationRequest) -> LLMResponse:
        self.requests.append(request)
        if self.on_call:
            self.on_call(request)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(
            content=reply,
            input_tokens=10,
            output_tokens=len(reply),
            model=request.model or self.default_model,
            provider=self.name,
        )


class NetworkError(Exception):
    pass


@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_TEMPLATE)


@pytest.fixture
def sample_json(sample_data):
    return json.dumps(sample_data, ensure_ascii=False)


@pytest.fixture
def template(sample_data):
    return ProjectTemplate.model_validate(sample_data)


@pytest.fixture
def software_only_template(sample_data):
    del sample_data["technicalSolution"]["hardware"]
    return ProjectTemplate.model_validate(sample_data)


@pytest.fixture
def make_client():
    def _make(*replies: Reply, **kwargs):
        provider = ScriptedProvider(list(replies))
        return GenerationClient(provider, **kwargs), provider
    return _make
