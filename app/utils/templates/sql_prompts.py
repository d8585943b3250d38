generate_system_prompt = (
    "You are an expert SQL developer. Generate optimized SQL queries based on "
    "natural language descriptions. Always respond with valid JSON in the specified format."
)

transform_system_prompt = (
    "You are an expert SQL developer specializing in database migration and query optimization. "
    "Always respond with valid JSON in the specified format."
)

explain_system_prompt = (
    "You are an expert SQL educator and performance analyst. "
    "Provide clear, educational explanations of SQL queries. Always respond with valid JSON."
)

generate_prompt_template = """
Generate a SQL query based on the following natural language description:

Query: "{natural_language_query}"
Database: {database}
Subject Area: {subject}
Analysis Type: {analysis_type}

Options:
- Limit: {limit}
- Sort Order: {sort_order}
- Optimization Level: {optimization_level}

{schema_text}

Please generate an optimized SQL query that:
1. Accurately reflects the natural language request
2. Follows best practices for {database}
3. Is optimized for performance
4. Includes appropriate comments if complex

Respond with JSON containing:
{{
    "sql": "generated SQL query with proper formatting",
    "explanation": "detailed explanation of what the query does",
    "complexity": "simple|medium|complex",
    "estimatedExecutionTime": estimated_time_in_milliseconds,
    "suggestions": ["optimization suggestion 1", "suggestion 2"],
    "usedTables": ["table1", "table2", "table3"]
}}
"""

transform_prompt_template = """
Transform the following SQL query for {target_database} database with {optimization_level} optimization level:

Original SQL:
{original_sql}

Requirements:
- Ensure compatibility with {target_database}
- Apply {optimization_level} optimization techniques
- Maintain query functionality
- Provide explanation of changes made

Respond with JSON containing:
{{
    "sql": "transformed SQL query",
    "explanation": "detailed explanation of transformation",
    "complexity": "simple|medium|complex",
    "estimatedExecutionTime": number_in_milliseconds,
    "suggestions": ["optimization suggestion 1", "suggestion 2"],
    "usedTables": ["table1", "table2"]
}}
"""

explain_prompt_template = """
Explain the following SQL query in detail:

{sql}

Provide a comprehensive explanation including:
- Overall purpose and functionality
- Step-by-step breakdown of each part
- Performance analysis and optimization suggestions
- Complexity assessment

Respond with JSON containing:
{{
    "explanation": "comprehensive explanation of the query",
    "breakdown": [
        {{
            "section": "SELECT clause",
            "description": "detailed explanation"
        }}
    ],
    "complexity": "simple|medium|complex",
    "performance": {{
        "rating": number_from_1_to_10,
        "suggestions": ["performance improvement suggestion"]
    }}
}}
"""
