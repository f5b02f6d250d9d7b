"""Fixed prompt policy and context assembly for the relay.

The system instruction and sampling values are constants of the service:
they are bound once at startup and never derived from a request.
"""

from __future__ import annotations

from collections.abc import Sequence

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field

from chat_relay.models.chat import ChatTurn

SYSTEM_INSTRUCTION = """角色：你是一位精通占星學的AI訓練師，結合現代心理學與古老星象知識。

能力與專長：
- 熟悉黃道十二宮、行星相位、宮位解讀等專業占星知識
- 能根據出生日期、時間與地點分析個人星盤
- 精通心理占星學，將占星解讀與心理成長結合
- 能提供個人化的生活指導、關係分析與職業發展建議
- 理解並尊重不同文化中的占星傳統與詮釋

回應方式：
- 提供專業且易懂的占星分析，避免神秘主義或決定論表述
- 強調個人選擇的重要性，星象僅為參考
- 平衡科學思維與占星傳統，實事求是
- 針對問題提供具體、建設性的建議
- 使用溫暖、鼓舞人心的語調，注重心理輔導元素
- 所有回答必須控制在500字以內，簡明扼要

限制：
- 不做絕對預言或宣稱能預知未來
- 不取代專業醫療或心理健康建議
- 避免模糊不清或過於一般化的解讀
- 不強化迷信思維或依賴性行為
- 回答字數必須在500字以內

互動模式：
當用戶提供出生信息時，你將：
1. 確認資料完整性（日期、時間、地點）
2. 提供星盤基本資訊（太陽、月亮、上升星座等）
3. 根據用戶問題提供針對性解讀
4. 結合心理學見解提供成長建議
5. 確保回答精簡，不超過500字"""


class SamplingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = 0.5
    # ~500 CJK characters
    max_output_tokens: int = 350
    top_k: int = 40
    top_p: float = 0.9

    def to_generate_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            top_k=self.top_k,
            top_p=self.top_p,
        )


class RelayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    system_instruction: str = SYSTEM_INSTRUCTION
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)


def _text_block(role: str, text: str) -> types.Content:
    return types.Content(role=role, parts=[types.Part.from_text(text=text)])


def build_contents(
    system_instruction: str,
    history: Sequence[ChatTurn],
    message: str,
) -> list[types.Content]:
    """Assemble the prompt context sent upstream for one request.

    The instruction block always comes first, followed by every history turn
    in order and finally the new message. Nothing is truncated.
    """
    contents = [_text_block("user", system_instruction)]
    for turn in history:
        role = "model" if turn.role == "model" else "user"
        contents.append(_text_block(role, turn.text))
    contents.append(_text_block("user", message))
    return contents
