MOCK_TAVILY_RESPONSE = {
    "query": "weather today in Lisbon",
    "answer": "It is sunny in Lisbon with a high of 24°C.",
    "results": [
        {
            "title": "Lisbon Weather Forecast",
            "url": "https://weather.example.com/lisbon",
            "content": "Sunny, high 24°C, low 16°C. Light winds from the north.",
            "score": 0.93,
        },
        {
            "title": "Portugal weather live updates",
            "url": "https://news.example.com/portugal-weather",
            "content": "Clear skies across the coast through the weekend.",
            "score": 0.81,
        },
        {
            "title": "Lisbon climate in October",
            "url": "https://climate.example.com/lisbon/october",
            "content": "October averages 22°C during the day.",
            "score": 0.74,
        },
        {
            "title": "Travel tips for Lisbon",
            "url": "https://travel.example.com/lisbon",
            "content": "Pack layers for cooler evenings.",
            "score": 0.52,
        },
    ],
}

MOCK_GROQ_RESPONSE = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "model": "llama-3.1-8b-instant",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "It's sunny in Lisbon today, around 24°C."},
            "finish_reason": "stop",
        }
    ],
}

MOCK_GROQ_ERROR = '{"error":{"message":"The model `nope` does not exist","type":"invalid_request_error"}}'
