"""Built-in sample document that exercises every block and inline kind."""

SAMPLE_DOCUMENT = """### **Prose**
###### *Turning your markdown into HTML*
Prose parses a small, strict markdown dialect and renders it as HTML.
Every line needs its terminator, so remember to hit Enter after the last one.

##### What it supports
1. Headings, with as many levels as you have hash marks
2. Ordered lists
3. Unordered lists
4. Fenced code blocks with an optional language
5. **bold text**, *italic text* and `inline code`
6. Links and images

#### Links and images
- Read the [Python documentation](https://docs.python.org/3/) for more on strings.
- Images look like this: ![Python logo](https://www.python.org/static/img/python-logo.png)

#### Code
```python
from prose import render

print(render("# Hello\\n"))
```

That is all there is to it!
"""
