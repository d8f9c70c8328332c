"""Prompt templates for structured material generation (one per language)."""

from app.i18n import Language

LESSON_PLAN_PROMPTS = {
    Language.RU: """Создай подробный план урока по следующим параметрам:
- Предмет: {subject}
- Класс: {grade}
- Тема: {topic}
- Продолжительность: {duration} минут
- Цели урока: {objectives}

Структура плана:
1. Цели урока
2. Оборудование и материалы
3. Ход урока (с временными рамками)
4. Домашнее задание
5. Оценка результатов

Будь конкретным и практичным. Используй современные методы обучения.""",
    Language.KK: """Келесі параметрлер бойынша толық сабақ жоспарын жаса:
- Пән: {subject}
- Сынып: {grade}
- Тақырып: {topic}
- Ұзақтығы: {duration} минут
- Сабақтың мақсаттары: {objectives}

Жоспардың құрылымы:
1. Сабақтың мақсаттары
2. Құрал-жабдықтар мен материалдар
3. Сабақтың барысы (уақыт бойынша)
4. Үй тапсырмасы
5. Нәтижелерді бағалау

Нақты және практикалық бол. Заманауи оқыту әдістерін қолдан.""",
    Language.EN: """Create a detailed lesson plan with the following parameters:
- Subject: {subject}
- Grade: {grade}
- Topic: {topic}
- Duration: {duration} minutes
- Lesson objectives: {objectives}

Plan structure:
1. Lesson objectives
2. Equipment and materials
3. Lesson flow (with timings)
4. Homework
5. Assessment of results

Be specific and practical. Use modern teaching methods.""",
}

NO_OBJECTIVES = {
    Language.RU: "Не указаны",
    Language.KK: "Көрсетілмеген",
    Language.EN: "Not specified",
}

PRESENTATION_PROMPTS = {
    Language.RU: """Создай структуру презентации по следующим параметрам:
- Тема: {topic}
- Класс: {grade}
- Количество слайдов: {slides}
- Стиль: {style}

КРИТИЧЕСКИ ВАЖНО: Создай ТОЧНО {slides} слайдов, не больше и не меньше!

СТРУКТУРА ПРЕЗЕНТАЦИИ ({slides} слайдов):
- Слайд 1: Титульный слайд (тема, класс, дата)
- Слайд 2: План презентации или введение
- Слайды 3-{body_end}: Основное содержание
- Слайд {slides}: Заключение или домашнее задание

ДЛЯ КАЖДОГО СЛАЙДА СОЗДАЙ:
1. Номер слайда: "Слайд 1:", "Слайд 2:", и т.д.
2. Заголовок слайда
3. Подробное содержание слайда
4. Рекомендации по оформлению

ОБЯЗАТЕЛЬНО СОЗДАЙ ВСЕ {slides} СЛАЙДОВ ПОЛНОСТЬЮ!
НЕ ОСТАНАВЛИВАЙСЯ НА СЕРЕДИНЕ!""",
    Language.KK: """Келесі параметрлер бойынша презентация құрылымын жаса:
- Тақырып: {topic}
- Сынып: {grade}
- Слайдтар саны: {slides}
- Стиль: {style}

ӨТЕ МАҢЫЗДЫ: ДӘЛ {slides} слайд жаса, артық та, кем де емес!

ПРЕЗЕНТАЦИЯ ҚҰРЫЛЫМЫ ({slides} слайд):
- Слайд 1: Титулдық слайд (тақырып, сынып, күні)
- Слайд 2: Презентация жоспары немесе кіріспе
- Слайдтар 3-{body_end}: Негізгі мазмұн
- Слайд {slides}: Қорытынды немесе үй тапсырмасы

ӘР СЛАЙД ҮШІН:
1. Слайд нөмірі: "Слайд 1:", "Слайд 2:" және т.с.с.
2. Слайд тақырыбы
3. Слайдтың толық мазмұны
4. Безендіру бойынша ұсыныстар

БАРЛЫҚ {slides} СЛАЙДТЫ ТОЛЫҚ ЖАСА!
ОРТАСЫНДА ТОҚТАМА!""",
    Language.EN: """Create a presentation outline with the following parameters:
- Topic: {topic}
- Grade: {grade}
- Number of slides: {slides}
- Style: {style}

CRITICAL: Create EXACTLY {slides} slides, no more and no fewer!

PRESENTATION STRUCTURE ({slides} slides):
- Slide 1: Title slide (topic, grade, date)
- Slide 2: Outline or introduction
- Slides 3-{body_end}: Main content
- Slide {slides}: Conclusion or homework

FOR EVERY SLIDE PROVIDE:
1. The slide number: "Slide 1:", "Slide 2:" and so on
2. The slide title
3. Detailed slide content
4. Design recommendations

YOU MUST CREATE ALL {slides} SLIDES IN FULL!
DO NOT STOP HALFWAY!""",
}

TEST_PROMPTS = {
    Language.RU: """Создай тест по следующим параметрам:
- Предмет: {subject}
- Класс: {grade}
- Тема: {topic}
- Количество вопросов: {questions}
- Сложность: {difficulty}

Создай тест с разными типами вопросов:
1. Вопросы с выбором ответа (A, B, C, D)
2. Вопросы с кратким ответом
3. Вопросы на соответствие
4. Вопросы с развернутым ответом

Для каждого вопроса укажи:
- Текст вопроса
- Варианты ответов (если применимо)
- Правильный ответ
- Объяснение (если нужно)

Включи критерии оценивания.""",
    Language.KK: """Келесі параметрлер бойынша тест жаса:
- Пән: {subject}
- Сынып: {grade}
- Тақырып: {topic}
- Сұрақтар саны: {questions}
- Күрделілігі: {difficulty}

Әртүрлі сұрақ түрлерін қолдан:
1. Жауап таңдау сұрақтары (A, B, C, D)
2. Қысқа жауапты сұрақтар
3. Сәйкестендіру сұрақтары
4. Толық жауапты сұрақтар

Әр сұрақ үшін көрсет:
- Сұрақ мәтіні
- Жауап нұсқалары (қажет болса)
- Дұрыс жауап
- Түсіндірме (қажет болса)

Бағалау критерийлерін қос.""",
    Language.EN: """Create a test with the following parameters:
- Subject: {subject}
- Grade: {grade}
- Topic: {topic}
- Number of questions: {questions}
- Difficulty: {difficulty}

Use different question types:
1. Multiple choice (A, B, C, D)
2. Short answer
3. Matching
4. Extended answer

For every question include:
- The question text
- Answer options (if applicable)
- The correct answer
- An explanation (if needed)

Include grading criteria.""",
}
