"""Site Builder - 프롬프트로 정적 웹사이트를 생성하는 도구 호출 에이전트"""
